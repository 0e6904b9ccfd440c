"""
FastAPI application for the career discovery matching engine
"""
import logging
import os
from dotenv import load_dotenv

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from typing import Any, Dict, List, Literal, Optional
from pydantic import BaseModel, Field

from core.quiz_results import QuizResults
from inference.answer_converter import process_quiz_responses
from matching.engine import generate_career_matches, rank_all_careers
from roadmap.generator import generate_roadmap

from datetime import datetime

load_dotenv()
logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())
logger = logging.getLogger(__name__)

app = FastAPI(title="Career Discovery API", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",")],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================================
# REQUEST/RESPONSE MODELS
# ============================================================================

class QuizSubmission(BaseModel):
    """Raw quiz answers from the frontend"""
    responses: Dict[str, Any]


class InterestPayload(BaseModel):
    interest: str
    percentage: float = Field(ge=0, le=100)


class QuizResultsPayload(BaseModel):
    """Normalized quiz result, camelCase as the frontend stores it"""
    workStyle: Dict[str, int] = {}
    cognitiveStrength: Dict[str, int] = {}
    socialApproach: Dict[str, int] = {}
    motivation: Dict[str, int] = {}
    interests: List[InterestPayload] = []
    miniGameMetrics: Optional[Dict[str, Any]] = None

    def to_results(self) -> QuizResults:
        return QuizResults.from_dict(self.model_dump())


class SubmissionResponse(BaseModel):
    results: Dict[str, Any]
    matches: List[Dict[str, Any]]


class RoadmapRequest(BaseModel):
    careerTitle: str
    responses: Optional[Dict[str, Any]] = None
    ageGroup: Literal["teen", "youngAdult", "adult", "midCareer", "lateCareer"] = "teen"
    priorExperience: Literal["none", "entry", "intermediate", "advanced", "expert"] = "none"


# ============================================================================
# HEALTH CHECK
# ============================================================================

@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring"""
    return {
        "status": "healthy",
        "service": "career-discovery",
        "timestamp": datetime.now().isoformat()
    }


# ============================================================================
# QUIZ ENDPOINTS
# ============================================================================

@app.post("/quiz/process")
async def process_quiz(submission: QuizSubmission):
    """Normalize raw answers into trait tallies and interests"""
    return process_quiz_responses(submission.responses).to_dict()


@app.post("/quiz/submit", response_model=SubmissionResponse)
async def submit_quiz(submission: QuizSubmission):
    """Normalize raw answers and return the top career matches"""
    results = process_quiz_responses(submission.responses)

    try:
        matches = generate_career_matches(results)
    except Exception as e:
        logger.exception("Matching failed")
        raise HTTPException(status_code=500, detail=f"Error matching careers: {str(e)}")

    return SubmissionResponse(
        results=results.to_dict(),
        matches=[m.to_dict() for m in matches],
    )


# ============================================================================
# CAREER ENDPOINTS
# ============================================================================

@app.post("/careers/matches")
async def career_matches(payload: QuizResultsPayload):
    """Top matches for an already normalized quiz result"""
    try:
        matches = generate_career_matches(payload.to_results())
    except Exception as e:
        logger.exception("Matching failed")
        raise HTTPException(status_code=500, detail=f"Error matching careers: {str(e)}")
    return [m.to_dict() for m in matches]


@app.post("/careers/ranking")
async def career_ranking(payload: QuizResultsPayload):
    """Every catalog career with its score breakdown, best first"""
    try:
        ranking = rank_all_careers(payload.to_results())
    except Exception as e:
        logger.exception("Ranking failed")
        raise HTTPException(status_code=500, detail=f"Error ranking careers: {str(e)}")
    return [s.to_dict() for s in ranking]


# ============================================================================
# ROADMAP ENDPOINT
# ============================================================================

@app.post("/roadmap")
async def career_roadmap(request: RoadmapRequest):
    """Phased plan for one career, adjusted for age group and experience"""
    results = process_quiz_responses(request.responses) if request.responses else None

    try:
        roadmap = generate_roadmap(
            request.careerTitle,
            results=results,
            age_group=request.ageGroup,
            prior_experience=request.priorExperience,
        )
    except Exception as e:
        logger.exception("Roadmap generation failed")
        raise HTTPException(status_code=500, detail=f"Error generating roadmap: {str(e)}")
    return roadmap.to_dict()


# ============================================================================
# RUN SERVER
# ============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv("PORT", "8000")))
