"""FastAPI application: API routers and server-rendered pages."""

import logging
from contextlib import asynccontextmanager
from typing import Annotated
from urllib.parse import urlencode

from fastapi import FastAPI, Form, HTTPException, Query, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles
from pydantic import ValidationError

from app.config import get_settings
from app.db.database import init_db
from app.dependencies import AppSettings, DbSession
from app.employees import router as employees_router
from app.employees.schemas import EmployeeCreate, EmployeeStatus, EmployeeUpdate
from app.employees.service import DuplicateEmployeeNumberError, EmployeeService
from app.labels import router as labels_router
from app.labels import selection as label_selection
from app.labels.exceptions import EmployeeNotFoundError
from app.labels.service import LabelService
from app.labels.sheet import DEFAULT_GEOMETRY
from app.printing import PrintTiming, sheet_url
from app.templating import BASE_DIR, templates

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info("%s started", settings.app_name)
    yield


app = FastAPI(title=settings.app_name, debug=settings.debug, lifespan=lifespan)
app.mount("/static", StaticFiles(directory=str(BASE_DIR / "static")), name="static")

app.include_router(employees_router, prefix="/api/employees", tags=["employees"])
app.include_router(labels_router, prefix="/api", tags=["labels"])


@app.exception_handler(EmployeeNotFoundError)
async def employee_not_found_handler(request: Request, exc: EmployeeNotFoundError):
    """Render the not-found page for unknown employees on HTML routes."""
    return templates.TemplateResponse(
        request,
        "not_found.html",
        {"message": str(exc)},
        status_code=status.HTTP_404_NOT_FOUND,
    )


def _first_error(exc: ValidationError) -> str:
    error = exc.errors()[0]
    field = str(error["loc"][-1]).replace("_", " ") if error.get("loc") else "input"
    return f"{field.capitalize()}: {error['msg']}"


def _redirect(path: str, **params: str) -> RedirectResponse:
    query = urlencode({k: v for k, v in params.items() if v})
    return RedirectResponse(f"{path}?{query}" if query else path, status_code=status.HTTP_303_SEE_OTHER)


# ---------------------------------------------------------------------------
# Directory pages
# ---------------------------------------------------------------------------


@app.get("/", include_in_schema=False)
async def index():
    """Send visitors to the directory."""
    return RedirectResponse("/employees", status_code=status.HTTP_302_FOUND)


@app.get("/employees", response_class=HTMLResponse, include_in_schema=False)
async def employees_page(
    request: Request,
    db: DbSession,
    q: str = Query(""),
    status_filter: EmployeeStatus = Query(EmployeeStatus.ACTIVE, alias="status"),
    edit: str | None = Query(None),
    error: str | None = Query(None),
    notice: str | None = Query(None),
):
    """Employee directory with search, status filter and create/edit forms.

    Args:
        q: Case-insensitive name filter.
        status_filter: Which employees to list.
        edit: ID of the employee whose edit form is shown.
        error: Message from a failed form submission.
        notice: Message from a successful form submission.

    Returns:
        HTMLResponse: Rendered directory page.
    """
    service = EmployeeService(db)
    editing = service.get_employee(edit) if edit else None
    return templates.TemplateResponse(
        request,
        "employees.html",
        {
            "employees": service.list_employees(q, status_filter),
            "query": q,
            "status": status_filter.value,
            "editing": editing,
            "error": error,
            "notice": notice,
        },
    )


@app.post("/employees", include_in_schema=False)
async def create_employee_form(
    db: DbSession,
    name: Annotated[str, Form()] = "",
    employee_number: Annotated[str, Form()] = "",
):
    """Create an employee from the directory form.

    Returns:
        RedirectResponse: Back to the directory with a notice or an error.
    """
    try:
        data = EmployeeCreate(name=name, employee_number=employee_number)
        employee = EmployeeService(db).create_employee(data)
    except ValidationError as e:
        return _redirect("/employees", error=_first_error(e))
    except DuplicateEmployeeNumberError as e:
        return _redirect("/employees", error=str(e))
    return _redirect("/employees", notice=f"Added {employee.name}.")


@app.post("/employees/{employee_id}", include_in_schema=False)
async def update_employee_form(
    employee_id: str,
    db: DbSession,
    name: Annotated[str, Form()] = "",
    employee_number: Annotated[str, Form()] = "",
):
    """Save the edit form for one employee.

    Returns:
        RedirectResponse: Back to the directory, keeping the edit form open
        when validation fails.

    Raises:
        EmployeeNotFoundError: If the employee does not exist.
    """
    try:
        data = EmployeeUpdate(name=name, employee_number=employee_number)
        employee = EmployeeService(db).update_employee(employee_id, data)
    except ValidationError as e:
        return _redirect("/employees", edit=employee_id, error=_first_error(e))
    except DuplicateEmployeeNumberError as e:
        return _redirect("/employees", edit=employee_id, error=str(e))
    if not employee:
        raise EmployeeNotFoundError([employee_id])
    return _redirect("/employees", notice=f"Saved {employee.name}.")


@app.post("/employees/{employee_id}/{action}", include_in_schema=False)
async def set_employee_active_form(employee_id: str, action: str, db: DbSession):
    """Activate or deactivate an employee from the directory.

    Args:
        employee_id: Employee to change.
        action: ``activate`` or ``deactivate``; anything else is a 404.

    Raises:
        EmployeeNotFoundError: If the employee does not exist.
    """
    if action not in ("activate", "deactivate"):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    employee = EmployeeService(db).set_active(employee_id, action == "activate")
    if not employee:
        raise EmployeeNotFoundError([employee_id])
    return _redirect("/employees", notice=f"{employee.name} {action}d.")


# ---------------------------------------------------------------------------
# Label builder and print views
# ---------------------------------------------------------------------------


@app.get("/labels", response_class=HTMLResponse, include_in_schema=False)
async def labels_page(
    request: Request,
    db: DbSession,
    app_settings: AppSettings,
    q: str = Query(""),
    ids: str | None = Query(None),
    toggle: str | None = Query(None),
):
    """Multi-select label builder.

    The selection lives in the ``ids`` query parameter; ``toggle`` adds or
    removes one employee and redirects to the canonical URL.
    """
    current = label_selection.parse_selection(ids)
    if toggle:
        updated = label_selection.toggle(current, toggle.strip())
        return _redirect("/labels", q=q, ids=label_selection.to_query(updated))

    service = EmployeeService(db)
    found = service.get_employees(list(current))
    selected = [found[i] for i in current if i in found]
    results = service.list_employees(q) if q.strip() else []
    return templates.TemplateResponse(
        request,
        "labels.html",
        {
            "query": q,
            "selection": current,
            "selected": selected,
            "results": results,
            "is_full": label_selection.is_full(current),
            "toggle_url": lambda employee_id: "/labels?"
            + urlencode({"q": q, "ids": label_selection.to_query(current), "toggle": employee_id}),
            "print_url": sheet_url(current) if current else None,
            "active_employees": service.list_employees(),
            "timing": PrintTiming.from_settings(app_settings).script_config(),
        },
    )


@app.get("/print", response_class=HTMLResponse, include_in_schema=False)
async def print_sheet_page(
    request: Request,
    db: DbSession,
    app_settings: AppSettings,
    employee_id: str | None = Query(None, alias="id"),
    count: str | None = Query(None),
    ids: str | None = Query(None),
    autoprint: str = Query("1"),
):
    """Full label sheet. Unknown employees render the not-found page."""
    sheet = LabelService(db, app_settings).sheet_from_params(employee_id, count, ids)
    return templates.TemplateResponse(
        request,
        "print_sheet.html",
        {
            "sheet": sheet,
            "geometry": DEFAULT_GEOMETRY,
            "autoprint": autoprint != "0",
            "timing": PrintTiming.from_settings(app_settings).script_config(),
        },
    )


@app.get("/print/{employee_id}", response_class=HTMLResponse, include_in_schema=False)
async def print_single_page(
    employee_id: str,
    request: Request,
    db: DbSession,
    app_settings: AppSettings,
):
    """Single label with the name exactly as stored."""
    employee = EmployeeService(db).get_employee(employee_id)
    if not employee:
        raise EmployeeNotFoundError([employee_id])
    return templates.TemplateResponse(
        request,
        "print_single.html",
        {
            "employee": employee,
            "autoprint": True,
            "timing": PrintTiming.from_settings(app_settings).script_config(),
        },
    )
