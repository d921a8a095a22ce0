from fastapi import Request
from fastapi.templating import Jinja2Templates
import config

templates = Jinja2Templates(directory=str(config.TEMPLATES_DIR))


def render_template(
    request: Request, template_name: str, context: dict = None, status_code: int = 200
):
    """
    Renders a Jinja2 template with the given context.
    """
    return templates.TemplateResponse(
        request, template_name, context or {}, status_code=status_code
    )
