from __future__ import annotations

from typing import Optional

from fastapi import APIRouter

from content import DEFAULT_CATALOG

router = APIRouter()


@router.get("/api/content/universities")
async def api_content_universities(min_score: Optional[int] = None):
    if min_score is None:
        unis = DEFAULT_CATALOG.universities
    else:
        unis = DEFAULT_CATALOG.universities_above(min_score)
    return {"universities": [u.to_json_dict() for u in unis]}


@router.get("/api/content/majors")
async def api_content_majors():
    return {
        "majors": [
            {"name": m.name, "major_type": m.major_type, "description": m.description, "bonus": m.bonus}
            for m in DEFAULT_CATALOG.majors
        ]
    }


@router.get("/api/content/backgrounds")
async def api_content_backgrounds():
    return {"backgrounds": [b.to_json_dict() for b in DEFAULT_CATALOG.backgrounds]}


@router.get("/api/content/shop")
async def api_content_shop():
    return {"items": [i.to_json_dict() for i in DEFAULT_CATALOG.shop_catalog()]}
