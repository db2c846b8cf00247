"""Top-level web router — aggregates the page and article routers."""

from fastapi import APIRouter

from blog.presentation.web.endpoints.pages import router as pages_router
from blog.presentation.web.endpoints.articles import router as articles_router

router = APIRouter()
router.include_router(pages_router)
router.include_router(articles_router)
