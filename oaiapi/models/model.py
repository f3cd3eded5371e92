"""
OAIAPI — OpenAI API Client.

Модель идентификатора модели OpenAI.
В телах результатов поле "model" обычно приходит строкой ("whisper-1"),
а в списке моделей — объектом; оба варианта декодируются в Model.

Copyright (c) 2025 Andrey Sobolev (haiodo@gmail.com)
Licensed under MIT License.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Model(BaseModel):
    """
    Модель, использованная для генерации результата.

    Example:
        >>> Model.model_validate("whisper-1").id
        'whisper-1'
        >>> str(Model(id="whisper-1"))
        'whisper-1'
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: str
    object_type: Optional[str] = Field(default=None, alias="object")
    owned_by: Optional[str] = None
    created_unix_time: Optional[int] = Field(default=None, alias="created")

    @model_validator(mode="before")
    @classmethod
    def _from_model_id(cls, data: Any) -> Any:
        # Result bodies carry only the id string
        if isinstance(data, str):
            return {"id": data}
        return data

    def __str__(self) -> str:
        return self.id
