from pydantic import BaseModel, ConfigDict, StrictFloat, StrictInt, StrictStr
from typing import Dict, Optional, Union


# Structured outcome of comparing a CV with a job description
class EvaluatorResult(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", allow_inf_nan=False)

    score: Union[StrictInt, StrictFloat]  # 0..100 expected, not enforced
    summary: StrictStr
    strengths: StrictStr
    gaps: StrictStr
    suggestions: StrictStr


# Envelope returned for every analysis, success or failure
class AnalysisResponse(BaseModel):
    ok: bool
    message: str
    result: Optional[EvaluatorResult] = None


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str


class APIInfoResponse(BaseModel):
    name: str
    version: str
    endpoints: Dict[str, str]
