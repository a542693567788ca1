"""
HTTP surface for resume ingestion and similarity search.
"""

from fastapi import FastAPI, HTTPException, Depends
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from typing import List

from .schemas import (
    ResumeIngestRequest,
    ResumeIngestResponse,
    ResumeSummary,
    ResumeDetailResponse,
    ResumeListResponse,
    SearchRequest,
    SearchResult,
    HealthResponse,
    ErrorResponse
)
from ..core.config import CORS_ORIGINS, VERSION, debug_enabled, validate_config
from ..core.search_service import (
    InvalidRequestError,
    ResumeNotFoundError,
    ResumeSearchService,
    get_search_service
)
from ..util.logging import logger

logger.log_config_issues(validate_config())

# Initialize the FastAPI application
app = FastAPI(
    title="Resume Match API",
    version=VERSION,
    description="Resume ingestion and embedding similarity search",
    docs_url="/docs" if debug_enabled() else None,
    redoc_url="/redoc" if debug_enabled() else None
)

# Add CORS middleware to allow frontend connections
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health", response_model=HealthResponse)
def health_check_endpoint(service: ResumeSearchService = Depends(get_search_service)):
    """Check system health."""
    store_health = service.store.healthy()

    return HealthResponse(
        status="healthy" if store_health else "unhealthy",
        version=VERSION,
        store_health=store_health,
        resume_count=service.store.count() if store_health else 0,
        embed_provider=service.embedding_provider.__class__.__name__,
        embed_dimension=service.embedding_provider.get_dimension()
    )


@app.post("/api/resumes", response_model=ResumeIngestResponse,
          responses={400: {"model": ErrorResponse}})
def ingest_resume_endpoint(request: ResumeIngestRequest,
                           service: ResumeSearchService = Depends(get_search_service)):
    """Embed and store a resume's extracted text."""
    try:
        result = service.ingest_resume(
            text=request.text,
            name=request.name,
            email=request.email,
            file_name=request.file_name
        )
    except InvalidRequestError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return ResumeIngestResponse(success=True, id=result.id, snippet=result.snippet)


@app.get("/api/resumes", response_model=ResumeListResponse)
def list_resumes_endpoint(service: ResumeSearchService = Depends(get_search_service)):
    """List stored resumes without text or embeddings."""
    return ResumeListResponse(
        resumes=[
            ResumeSummary(
                id=r.id,
                name=r.name,
                email=r.email,
                file_name=r.file_name,
                created_at=r.created_at
            )
            for r in service.list_resumes()
        ]
    )


@app.get("/api/resumes/{resume_id}", response_model=ResumeDetailResponse,
         responses={404: {"model": ErrorResponse}})
def get_resume_endpoint(resume_id: str, service: ResumeSearchService = Depends(get_search_service)):
    """Get a single resume by id."""
    try:
        record = service.get_resume(resume_id)
    except ResumeNotFoundError:
        raise HTTPException(status_code=404, detail="Resume not found")

    return ResumeDetailResponse(
        id=record.id,
        name=record.name,
        email=record.email,
        file_name=record.file_name,
        created_at=record.created_at,
        text=record.text
    )


@app.post("/api/search", response_model=List[SearchResult],
          responses={400: {"model": ErrorResponse}})
def search_endpoint(request: SearchRequest, service: ResumeSearchService = Depends(get_search_service)):
    """Rank stored resumes by embedding similarity to the query."""
    try:
        results = service.search(request.query, request.top_k)
    except InvalidRequestError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return [SearchResult(**result.to_dict()) for result in results]


@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """Handle all unhandled exceptions."""
    logger.error(f"Unhandled exception: {exc}")
    content = {"detail": "Internal server error"}
    if debug_enabled():
        content["debug"] = str(exc)
    return JSONResponse(
        status_code=500,
        content=content,
    )
