import csv
import math
from dataclasses import asdict
from io import StringIO

from fastapi import Depends, FastAPI, Form, HTTPException, Query, Request
from fastapi.responses import HTMLResponse, RedirectResponse, Response
from fastapi.templating import Jinja2Templates

from .catalog import CATEGORIES, CATEGORY_ICONS, get_category_by_name
from .logging_setup import configure_logging
from .models import DisplayTransaction, TransactionInput
from .settings import get_settings
from .store import SCALE_FACTOR, TransactionsStore, get_store


settings = get_settings()
configure_logging(settings)

app = FastAPI()
templates = Jinja2Templates(directory=str(settings.templates_dir))


def _category_view(category) -> dict:
    icon = CATEGORY_ICONS.get(category.icon)
    return {
        **asdict(category),
        "icon_src": icon.src if icon else None,
        "icon_alt": icon.alt if icon else None,
    }


def _recent_rows(transactions: list[DisplayTransaction]) -> list[dict]:
    rows = []
    for txn in transactions:
        category = get_category_by_name(txn.category)
        rows.append(
            {
                **asdict(txn),
                "icon_bg": category.icon_bg if category else None,
                "icon": CATEGORY_ICONS.get(category.icon) if category else None,
            }
        )
    return rows


def _txn_json(txn) -> dict:
    data = asdict(txn)
    # JSON has no NaN; an unparsable amount is sent as null.
    if not math.isfinite(data["amount"]):
        data["amount"] = None
    return data


def _build_index_context(request: Request, store: TransactionsStore) -> dict:
    return {
        "request": request,
        "categories": [_category_view(category) for category in CATEGORIES],
        "recent": _recent_rows(store.get_recent_transactions(settings.recent_limit)),
    }


def _render_partial(request: Request, store: TransactionsStore) -> HTMLResponse:
    context = _build_index_context(request, store)
    table_html = templates.get_template("_recent_transactions.html").render(**context)
    return HTMLResponse(table_html)


@app.get("/", response_class=HTMLResponse)
def index(request: Request, store: TransactionsStore = Depends(get_store)):
    return templates.TemplateResponse(
        request, "index.html", _build_index_context(request, store)
    )


@app.post("/transactions", response_class=HTMLResponse)
def create_transaction(
    request: Request,
    category: int = Form(...),
    amount: str = Form(...),
    date: str = Form(...),
    description: str | None = Form(default=None),
    merchant: str | None = Form(default=None),
    store: TransactionsStore = Depends(get_store),
):
    result = store.add_transaction(
        TransactionInput(
            category=category,
            amount=amount,
            date=date,
            description=(description or "").strip() or None,
            merchant=(merchant or "").strip() or None,
        )
    )
    if not result.ok:
        raise HTTPException(status_code=400, detail=result.failure.value)

    if request.headers.get("HX-Request") == "true":
        return _render_partial(request, store)
    return RedirectResponse(url="/", status_code=303)


@app.get("/api/categories")
def list_categories():
    return [_category_view(category) for category in CATEGORIES]


@app.get("/api/transactions")
def list_transactions(store: TransactionsStore = Depends(get_store)):
    return [_txn_json(txn) for txn in store.get_all_transactions()]


@app.get("/api/transactions/recent")
def recent_transactions(
    limit: int | None = Query(default=None, ge=0),
    store: TransactionsStore = Depends(get_store),
):
    resolved_limit = settings.recent_limit if limit is None else limit
    return [_txn_json(txn) for txn in store.get_recent_transactions(resolved_limit)]


@app.get("/export.csv")
def export_csv(store: TransactionsStore = Depends(get_store)):
    output = StringIO()
    writer = csv.writer(output)
    writer.writerow(["date", "category", "amount", "description", "merchant"])
    for txn in store.get_all_transactions():
        writer.writerow(
            [
                txn.date,
                txn.category,
                f"{txn.amount / SCALE_FACTOR:.2f}",
                txn.description or "",
                txn.merchant or "",
            ]
        )

    body = "\ufeff" + output.getvalue()
    return Response(
        content=body,
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": 'attachment; filename="transactions.csv"'},
    )
