from fastapi import APIRouter, Depends, Query

from app.dependencies.services import get_catalog_service
from app.models.card import CardSchema, CatalogResponse
from app.services.catalog_service import CatalogService
from app.services.errors import not_found
from engine.catalog import CardCatalog

router = APIRouter(
    prefix="/api/v1/catalog",
    tags=["catalog"]
)


def _catalog_response(catalog: CardCatalog, source: str) -> CatalogResponse:
    return CatalogResponse(
        cards=[CardSchema.model_validate(record) for record in catalog.to_records()],
        source=source,
    )


@router.get("", response_model=CatalogResponse)
def list_cards(
    q: str | None = Query(None, description="Case-insensitive match on card name or issuer"),
    issuer: str | None = None,
    service: CatalogService = Depends(get_catalog_service),
):
    catalog, source = service.get_catalog_with_source()
    if q:
        catalog = CardCatalog(catalog.search(q))
    if issuer:
        catalog = CardCatalog(catalog.cards_by_issuer(issuer))
    return _catalog_response(catalog, source)


@router.get("/{card_id}", response_model=CardSchema)
def get_card(card_id: str, service: CatalogService = Depends(get_catalog_service)):
    card = service.get_catalog().get_card_by_id(card_id)
    if card is None:
        raise not_found("CARD_NOT_FOUND", "Card not found in catalog.", card_id=card_id)
    return CardSchema.model_validate(card.to_dict())


@router.post("/refresh", response_model=CatalogResponse)
def refresh_catalog(service: CatalogService = Depends(get_catalog_service)):
    """Re-read the catalog from the database and rewrite the cache."""
    catalog, source = service.refresh_cards()
    return _catalog_response(catalog, source)
