"""
Example routes: views, JSON, typed path parameters, cookies, localization
and request validation
"""

import logging
from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse

from api.dependencies import get_localization, get_templates
from models.employee import Employee
from utils.localization import Localization
from utils.request_fields import get_body_field, get_field

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/", response_class=HTMLResponse)
async def welcome(request: Request, templates=Depends(get_templates)):
    """Welcome page"""
    return templates.TemplateResponse(request=request, name="welcome.html", context={})


@router.get("/json")
async def json_example():
    """Nested JSON structure"""
    return {
        "number": 123,
        "string": "test",
        "array": [0, 1, 2, 3],
        "dict": {
            "name": "Vapor",
            "lang": "Swift"
        }
    }


@router.get("/data/{value}")
async def data_example(value: int, request: Request):
    """Echo a typed path parameter and the optional `name` request field"""
    name = get_field(request, "name") or await get_body_field(request, "name") or "no name"
    return {"int": value, "name": name}


@router.get("/posts/{post_id}", response_class=PlainTextResponse)
async def get_post(post_id: int):
    """Only integer post ids are routed here; anything else is a 422"""
    return f"Requesting post with ID {post_id}"


@router.get("/leaf", response_class=HTMLResponse)
async def leaf(request: Request, templates=Depends(get_templates)):
    """Render a template with a greeting"""
    return templates.TemplateResponse(
        request=request,
        name="template.html",
        context={"greeting": "Hello, world!"}
    )


@router.get("/plaintext", response_class=PlainTextResponse)
async def plaintext():
    """Fixed plaintext body, useful for benchmarking"""
    return "Hello, World!"


@router.get("/session")
async def session(request: Request):
    """Report the session and cookies received, then set both for the next request"""
    response = JSONResponse(content={
        "session.data": dict(request.session),
        "request.cookies": dict(request.cookies),
        "instructions": "Refresh to see cookie and session get set."
    })
    request.session["name"] = "Vapor"
    response.set_cookie("test", "123")
    return response


@router.get("/localization/{lang}")
async def localization(lang: str, strings: Localization = Depends(get_localization)):
    """Localized welcome title and body"""
    return {
        "title": strings.get(lang, "welcome", "title"),
        "body": strings.get(lang, "welcome", "body")
    }


@router.post("/validation", response_model=Employee)
async def validation(employee: Employee):
    """Accept an employee only if the e-mail and name are valid"""
    logger.info(f"Validated employee '{employee.name}'")
    return employee
