"""
FastAPI Content Catalog API Service
"""
import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import List, Optional

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Query, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from catalog.api.services import ContentService
from catalog.shared import Content, ContentQuery, HealthCheck, InvalidPayloadError, SortOrder, config
from catalog.shared.config import Config
from catalog.shared.models import ContentCreateRequest, ContentUpdateRequest, DeleteResponse
from catalog.shared.repositories import ContentRepository
from catalog.shared.seed import build_repository


# Configure logging
logging.basicConfig(
    level=getattr(logging, config.app.log_level.upper()),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

router = APIRouter()


def get_content_service(request: Request) -> ContentService:
    """Dependency injection for content service"""
    return ContentService(
        repository=request.app.state.repository,
        settings=request.app.state.settings.catalog,
    )


def _bad_request(exc: ValueError) -> HTTPException:
    detail = {"message": str(exc)}
    if isinstance(exc, InvalidPayloadError) and exc.errors:
        detail["errors"] = exc.errors
    return HTTPException(status_code=400, detail=detail)


@router.get("/", response_model=dict)
async def root(request: Request):
    """Root endpoint"""
    settings = request.app.state.settings
    return {
        "message": "Content Catalog API",
        "version": settings.app.version,
        "docs_url": "/docs" if settings.app.debug else "Contact admin for API documentation"
    }


@router.get("/health", response_model=HealthCheck)
async def health_check(request: Request):
    """Health check endpoint"""
    repository = request.app.state.repository
    return HealthCheck(
        status="healthy",
        timestamp=datetime.now(timezone.utc),
        version=request.app.state.settings.app.version,
        contents=repository.count(),
        services={"store": "in-memory"},
    )


# Featured and top-rated must be registered before /api/contents/{content_id}
@router.get("/api/contents/featured", response_model=List[Content])
async def featured_contents(content_service: ContentService = Depends(get_content_service)):
    """Highly rated contents for the landing page"""
    return content_service.featured()


@router.get("/api/contents/top-rated", response_model=List[Content])
async def top_rated_contents(content_service: ContentService = Depends(get_content_service)):
    """Contents ordered by rating, best first"""
    return content_service.top_rated()


@router.get("/api/contents", response_model=List[Content])
async def list_contents(
    search: Optional[str] = Query(None, description="Text to look for in title, description and genres"),
    genre: List[str] = Query(default=[], description="Filter by genre(s)"),
    country: List[str] = Query(default=[], description="Filter by country(ies)"),
    year_from: Optional[int] = Query(None, alias="yearFrom", description="Earliest release year"),
    year_to: Optional[int] = Query(None, alias="yearTo", description="Latest release year"),
    min_rating: Optional[float] = Query(None, alias="minRating", ge=0, le=10, description="Minimum rating"),
    sort_by: SortOrder = Query(SortOrder.POPULAR, alias="sortBy", description="Result ordering"),
    content_service: ContentService = Depends(get_content_service)
):
    """
    List contents with optional filters

    Supports filtering by:
    - search: case-insensitive text in title, description or genres
    - genre: one or more genres (OR logic)
    - country: one or more countries (OR logic)
    - yearFrom / yearTo: inclusive release year bounds
    - minRating: inclusive minimum rating
    - sortBy: popular, highest-rated, newest, oldest
    """
    query = ContentQuery(
        search_text=search,
        genres=genre,
        countries=country,
        year_from=year_from,
        year_to=year_to,
        min_rating=min_rating,
        sort_by=sort_by,
    )
    return content_service.filter_contents(query)


@router.get("/api/contents/{content_id}", response_model=Content)
async def get_content(
    content_id: int,
    content_service: ContentService = Depends(get_content_service)
):
    """Get a specific content entry by ID"""
    content = content_service.get_content_by_id(content_id)
    if not content:
        raise HTTPException(status_code=404, detail="Content not found")
    return content


@router.get("/api/search", response_model=List[Content])
async def search_contents(
    q: Optional[str] = Query(None, description="Search text"),
    content_service: ContentService = Depends(get_content_service)
):
    """Search contents by title, description and genre"""
    try:
        return content_service.search(q)
    except ValueError as e:
        raise _bad_request(e)


@router.post("/api/contents/filter", response_model=List[Content])
async def filter_contents(
    query: ContentQuery,
    content_service: ContentService = Depends(get_content_service)
):
    """Filter contents with a JSON query body"""
    return content_service.filter_contents(query)


@router.get("/api/admin/contents", response_model=List[Content])
async def admin_list_contents(content_service: ContentService = Depends(get_content_service)):
    """All contents for the admin table"""
    return content_service.list_contents()


@router.post("/api/admin/contents", response_model=Content)
async def create_content(
    payload: ContentCreateRequest,
    content_service: ContentService = Depends(get_content_service)
):
    """Create a content entry"""
    try:
        return content_service.create_content(payload)
    except ValueError as e:
        raise _bad_request(e)


@router.put("/api/admin/contents/{content_id}", response_model=Content)
async def update_content(
    content_id: int,
    changes: ContentUpdateRequest,
    content_service: ContentService = Depends(get_content_service)
):
    """Partially update a content entry"""
    try:
        content = content_service.update_content(content_id, changes)
    except ValueError as e:
        raise _bad_request(e)
    if not content:
        raise HTTPException(status_code=404, detail="Content not found")
    return content


@router.delete("/api/admin/contents/{content_id}", response_model=DeleteResponse)
async def delete_content(
    content_id: int,
    content_service: ContentService = Depends(get_content_service)
):
    """Delete a content entry"""
    if not content_service.delete_content(content_id):
        raise HTTPException(status_code=404, detail="Content not found")
    return DeleteResponse(success=True)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed path, query or body parameters"""
    logger.debug(f"Rejected {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=400,
        content={"detail": "Invalid request", "errors": jsonable_encoder(exc.errors())}
    )


async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler"""
    logger.error(f"Unhandled exception: {str(exc)}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error"}
    )


def create_app(settings: Optional[Config] = None, repository: Optional[ContentRepository] = None) -> FastAPI:
    """Build the API around one catalog repository.

    The repository is created (and seeded per ``settings.catalog``) here,
    once per application, unless the caller passes its own.
    """
    settings = settings or config
    if repository is None:
        repository = build_repository(
            seed_sample_data=settings.catalog.seed_sample_data,
            seed_file=settings.catalog.seed_file,
        )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan management"""
        logger.info("🚀 Starting Content Catalog API...")
        logger.info(f"✅ Catalog ready with {app.state.repository.count()} contents")

        yield

        logger.info("🛑 Shutting down Content Catalog API...")

    app = FastAPI(
        title="Content Catalog API",
        description="Browse, filter and manage dramas and movies",
        version=settings.app.version,
        lifespan=lifespan,
        docs_url="/docs" if settings.app.debug else None,
        redoc_url="/redoc" if settings.app.debug else None
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.app.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["*"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=1000)

    app.state.settings = settings
    app.state.repository = repository

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)
    app.include_router(router)
    return app


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "catalog.api.main:create_app",
        factory=True,
        host=config.app.host,
        port=config.app.port,
        log_level=config.app.log_level.lower(),
        reload=config.app.debug
    )
