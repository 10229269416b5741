"""
Value types returned by the code generation services.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class CodeLayer(str, Enum):
    ENTITY = 'entity'
    REPOSITORY = 'repository'
    SERVICE = 'service'
    CONTROLLER = 'controller'


class GeneratedFile(BaseModel):
    """One generated source artifact."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, use_enum_values=True)

    file_name: str = Field(alias='fileName')
    content: str
    layer: CodeLayer
    relative_path: str = Field(alias='relativePath')

    @property
    def lines_of_code(self) -> int:
        return len(self.content.split('\n'))
