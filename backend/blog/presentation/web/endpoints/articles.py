"""Article pages: show, create/store and edit/update forms."""

from typing import Any

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse, Response

from blog.application.interfaces import ViewRenderer
from blog.application.schemas import ArticleFormData, ArticleView
from blog.application.services import ArticleService
from blog.domain.exceptions import ArticleValidationError, EntityNotFoundError
from blog.infrastructure.dependencies import get_article_service, get_renderer

router = APIRouter(prefix="/articles", tags=["Articles"], default_response_class=HTMLResponse)

ARTICLE_NOT_FOUND = "404 article not found!"


def _render(renderer: ViewRenderer, template_name: str, data: dict[str, Any]) -> HTMLResponse:
    return HTMLResponse(renderer.render(template_name, data))


def _not_found() -> HTMLResponse:
    return HTMLResponse(ARTICLE_NOT_FOUND, status_code=status.HTTP_404_NOT_FOUND)


@router.get("", name="articles.index")
async def list_articles() -> HTMLResponse:
    # Placeholder until a listing page exists
    return HTMLResponse("Access article list.")


@router.get("/create", name="articles.create")
async def create_article_form(
    request: Request,
    renderer: ViewRenderer = Depends(get_renderer),
) -> HTMLResponse:
    """Blank form posting to the store route."""
    form = ArticleFormData(url=str(request.app.url_path_for("articles.store")))
    return _render(renderer, "articles/create.html", form.model_dump())


@router.post("", name="articles.store")
async def store_article(
    request: Request,
    title: str = Form(""),
    body: str = Form(""),
    service: ArticleService = Depends(get_article_service),
    renderer: ViewRenderer = Depends(get_renderer),
) -> HTMLResponse:
    """Create an article, or redisplay the form with field errors."""
    try:
        article_id = await service.create_article(title, body)
    except ArticleValidationError as e:
        form = ArticleFormData(
            title=title,
            body=body,
            url=str(request.app.url_path_for("articles.store")),
            errors=e.errors,
        )
        return _render(renderer, "articles/create.html", form.model_dump())
    return HTMLResponse(f"insertion successful, ID is {article_id}")


@router.get("/{article_id:int}", name="articles.show")
async def show_article(
    request: Request,
    article_id: int,
    service: ArticleService = Depends(get_article_service),
    renderer: ViewRenderer = Depends(get_renderer),
) -> HTMLResponse:
    try:
        article = await service.get_article(article_id)
    except EntityNotFoundError:
        return _not_found()

    data = {
        "article": ArticleView.model_validate(article, from_attributes=True).model_dump(),
        "edit_url": str(request.app.url_path_for("articles.edit", article_id=article_id)),
    }
    return _render(renderer, "articles/show.html", data)


@router.get("/{article_id:int}/edit", name="articles.edit")
async def edit_article_form(
    request: Request,
    article_id: int,
    service: ArticleService = Depends(get_article_service),
    renderer: ViewRenderer = Depends(get_renderer),
) -> HTMLResponse:
    """Form pre-filled with the stored values, posting to the update route."""
    try:
        article = await service.get_article(article_id)
    except EntityNotFoundError:
        return _not_found()

    form = ArticleFormData(
        title=article.title,
        body=article.body,
        url=str(request.app.url_path_for("articles.update", article_id=article_id)),
    )
    return _render(renderer, "articles/edit.html", form.model_dump())


@router.post("/{article_id:int}", name="articles.update")
async def update_article(
    request: Request,
    article_id: int,
    title: str = Form(""),
    body: str = Form(""),
    service: ArticleService = Depends(get_article_service),
    renderer: ViewRenderer = Depends(get_renderer),
) -> Response:
    """Apply the submitted values and redirect to the article page."""
    try:
        changed = await service.update_article(article_id, title, body)
    except EntityNotFoundError:
        return _not_found()
    except ArticleValidationError as e:
        form = ArticleFormData(
            title=title,
            body=body,
            url=str(request.app.url_path_for("articles.update", article_id=article_id)),
            errors=e.errors,
        )
        return _render(renderer, "articles/edit.html", form.model_dump())

    if changed > 0:
        show_url = request.app.url_path_for("articles.show", article_id=article_id)
        return RedirectResponse(str(show_url), status_code=status.HTTP_302_FOUND)
    return HTMLResponse("You haven't made any changes!")
