from fastapi import APIRouter

from menucost.services.templates import template_match_info, templates_by_category
from menucost.storage import db
from menucost.storage.repositories import list_inventory_items

router = APIRouter()


@router.get("/templates")
def get_templates() -> dict:
    """Recipe templates grouped by category, with how many ingredients the current inventory covers."""
    with db.get_session() as session:
        items = [r.to_item() for r in list_inventory_items(session)]
    categories = {}
    for category, templates in templates_by_category().items():
        rows = []
        for t in templates:
            matched, total = template_match_info(t, items)
            rows.append({
                "name": t.name,
                "retail_price": t.retail_price,
                "ingredients": [i.inventory_name for i in t.ingredients],
                "matched": matched,
                "total": total,
            })
        categories[category] = rows
    return {"categories": categories}
