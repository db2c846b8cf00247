"""Article form validation rules."""

TITLE_MIN_LENGTH = 3
TITLE_MAX_LENGTH = 40
BODY_MIN_LENGTH = 10


def validate_article_form(title: str, body: str) -> dict[str, str]:
    """Return a field → message mapping for every invalid field.

    Lengths are counted in characters (code points), not bytes. An empty
    mapping means the form is valid.
    """
    errors: dict[str, str] = {}

    # Whitespace-only input counts as blank, unlike a plain empty-string check
    if not title.strip():
        errors["title"] = "title required"
    elif not TITLE_MIN_LENGTH <= len(title) <= TITLE_MAX_LENGTH:
        errors["title"] = "title length out of range"

    if not body.strip():
        errors["body"] = "body required"
    elif len(body) < BODY_MIN_LENGTH:
        errors["body"] = "body too short"

    return errors
