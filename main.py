import logging
import tomllib
from pathlib import Path

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import get_settings
from database import SessionLocal, init_db
from input_utils import cents_to_amount, parse_amount, parse_date
from models import Category, PaymentType, Transaction, TransactionType
from periods import Period, resolve_period
from schemas import CategoryIn, TransactionIn
from services import (
    CategoryNotFound,
    CategoryService,
    DefaultCategoryProtected,
    StatsService,
    TransactionFilters,
    TransactionNotFound,
    TransactionService,
)

settings = get_settings()
logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

MAX_LIST_LIMIT = 500


def _load_app_version() -> str:
    pyproject = Path(__file__).resolve().parent / "pyproject.toml"
    try:
        with open(pyproject, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError):
        return "unknown"
    return str(data.get("project", {}).get("version", "unknown"))


APP_VERSION = _load_app_version()

app = FastAPI(title="Shop Ledger", version=APP_VERSION)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@app.on_event("startup")
def startup_event():
    init_db()
    logger.info(f"startup: version={APP_VERSION} timezone={settings.timezone}")


def ok(data: object = None, **extra: object) -> dict[str, object]:
    body: dict[str, object] = {"success": True}
    if data is not None:
        body["data"] = data
    body.update(extra)
    return body


def fail(status_code: int, error: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code, content={"success": False, "error": error}
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return fail(exc.status_code, str(exc.detail))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return fail(400, str(exc))


@app.exception_handler(SQLAlchemyError)
async def store_exception_handler(request: Request, exc: SQLAlchemyError):
    logger.exception(f"store_error: path={request.url.path}")
    return fail(500, str(exc))


def serialize_category(category: Category) -> dict[str, object]:
    return {
        "id": category.id,
        "name": category.name,
        "type": category.type.value,
        "icon": category.icon,
        "color": category.color,
        "isDefault": category.is_default,
        "createdAt": category.created_at.isoformat(),
        "updatedAt": category.updated_at.isoformat(),
    }


def serialize_transaction(txn: Transaction) -> dict[str, object]:
    return {
        "id": txn.id,
        "date": txn.date.isoformat(),
        "type": txn.type.value,
        "category": txn.category,
        "paymentType": txn.payment_type.value,
        "description": txn.description,
        "amount": cents_to_amount(txn.amount_cents),
        "createdAt": txn.created_at.isoformat(),
        "updatedAt": txn.updated_at.isoformat(),
    }


def period_from_request(request: Request) -> Period:
    period_slug = request.query_params.get("period")
    custom_date = request.query_params.get("date")
    try:
        return resolve_period(period_slug, custom_date)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


def filters_from_request(request: Request) -> TransactionFilters:
    type_param = request.query_params.get("type")
    txn_type = None
    if type_param:
        try:
            txn_type = TransactionType(type_param)
        except ValueError:
            txn_type = None
    try:
        start_param = request.query_params.get("startDate")
        end_param = request.query_params.get("endDate")
        start_date = parse_date(start_param) if start_param else None
        end_date = parse_date(end_param) if end_param else None
        limit_param = request.query_params.get("limit")
        limit = int(limit_param) if limit_param else None
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    if limit is not None:
        limit = min(max(limit, 1), MAX_LIST_LIMIT)
    return TransactionFilters(
        type=txn_type,
        category=request.query_params.get("category") or None,
        start_date=start_date,
        end_date=end_date,
        limit=limit,
    )


async def json_body(request: Request) -> dict:
    try:
        payload = await request.json()
    except ValueError as exc:
        raise HTTPException(status_code=400, detail="Invalid JSON body") from exc
    if not isinstance(payload, dict):
        raise HTTPException(status_code=400, detail="Expected a JSON object")
    return payload


@app.get("/healthz")
def healthz():
    return ok(version=APP_VERSION)


@app.get("/api/stats")
def api_stats(request: Request, db: Session = Depends(get_db)):
    period = period_from_request(request)
    summary = StatsService(db).summary(period)
    return ok(summary.as_payload())


@app.get("/api/reports")
def api_reports(request: Request, db: Session = Depends(get_db)):
    period = period_from_request(request)
    return ok(StatsService(db).report(period))


@app.get("/api/categories")
def api_list_categories(db: Session = Depends(get_db)):
    categories = CategoryService(db).list_all()
    return ok([serialize_category(c) for c in categories])


@app.post("/api/categories", status_code=201)
async def api_create_category(request: Request, db: Session = Depends(get_db)):
    payload = await json_body(request)
    try:
        data = CategoryIn(
            name=payload.get("name") or "",
            type=TransactionType(payload.get("type")),
            color=payload.get("color") or None,
            icon=payload.get("icon") or None,
        )
    except Exception as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    category = CategoryService(db).create(data)
    return ok(serialize_category(category))


@app.delete("/api/categories/{category_id}")
def api_delete_category(category_id: int, db: Session = Depends(get_db)):
    try:
        CategoryService(db).delete(category_id)
    except CategoryNotFound as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except DefaultCategoryProtected as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return ok(message="Category deleted successfully")


@app.get("/api/transactions")
def api_list_transactions(request: Request, db: Session = Depends(get_db)):
    filters = filters_from_request(request)
    items = TransactionService(db).list(filters)
    return ok([serialize_transaction(txn) for txn in items])


@app.post("/api/transactions", status_code=201)
async def api_create_transaction(request: Request, db: Session = Depends(get_db)):
    payload = await json_body(request)
    try:
        data = TransactionIn(
            date=parse_date(str(payload["date"])),
            type=TransactionType(payload["type"]),
            category=payload["category"],
            payment_type=PaymentType(payload["paymentType"]),
            description=payload["description"],
            amount_cents=parse_amount(payload["amount"]),
        )
    except KeyError as exc:
        raise HTTPException(
            status_code=400, detail=f"Missing field: {exc.args[0]}"
        ) from exc
    except Exception as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    txn = TransactionService(db).create(data)
    return ok(serialize_transaction(txn))


@app.delete("/api/transactions/{transaction_id}")
def api_delete_transaction(transaction_id: int, db: Session = Depends(get_db)):
    try:
        TransactionService(db).delete(transaction_id)
    except TransactionNotFound as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return ok(message="Transaction deleted successfully")


@app.post("/api/init")
def api_init(db: Session = Depends(get_db)):
    if CategoryService(db).seed_defaults():
        return ok(message="Default categories initialized successfully")
    return ok(message="Default categories already exist")


def main():
    import uvicorn

    uvicorn.run("main:app", host=settings.host, port=settings.port, reload=False)


if __name__ == "__main__":
    main()
