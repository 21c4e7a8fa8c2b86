from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class AppraisalRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    marca: Optional[str] = None
    modelo: Optional[str] = None
    anio: Optional[int] = Field(default=None, alias="año")
    kilometros: Optional[Union[int, float]] = None
    combustible: Optional[str] = None


class AppraisalDetails(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    marca: str
    modelo: str
    anio: int = Field(alias="año")
    kilometros: Union[int, float]
    combustible: str


class AppraisalResponse(BaseModel):
    tasacion: int
    detalles: AppraisalDetails
    coche_similar: Dict[str, Any]


class ErrorOut(BaseModel):
    error: str
