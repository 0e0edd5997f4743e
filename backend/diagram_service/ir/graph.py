from datetime import date
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class NodeCategory(str, Enum):
    FOCAL = "Core System"
    FOUND = "IncomeSystem"
    EXTERNAL = "External"
    MIDDLEWARE = "Middleware"


STANDARD_CRITICALITY = "Standard-2"


class GraphModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
    )


class Node(GraphModel):
    id: str
    name: str
    type: NodeCategory
    criticality: Optional[str] = None


class Link(GraphModel):
    source: str
    target: str
    pattern: Optional[str] = None
    frequency: Optional[str] = None
    role: Optional[str] = None
    middleware: Optional[str] = None


class DiagramMetadata(GraphModel):
    subject: Optional[str] = None
    review_code: Optional[str] = None   # single-system diagrams
    route: Optional[str] = None         # path diagrams: "START → END"
    generated_date: date = Field(default_factory=date.today)
    middleware_used: List[str] = Field(default_factory=list)


class Graph(GraphModel):
    nodes: List[Node] = Field(default_factory=list)
    links: List[Link] = Field(default_factory=list)
    metadata: DiagramMetadata = Field(default_factory=DiagramMetadata)

    def node_ids(self) -> List[str]:
        return [node.id for node in self.nodes]

    def node_by_id(self) -> Dict[str, Node]:
        return {node.id: node for node in self.nodes}
