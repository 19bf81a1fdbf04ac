from fastapi import APIRouter, Depends

from app.providers.factory import ProcessorSelector
from deps.selector import get_selector
from schemas import MethodCatalogResponse, ProviderCatalogResponse
from services.catalog import method_catalog, provider_catalog

router = APIRouter(prefix="/api/catalog", tags=["catalog"])


@router.get("/providers", response_model=ProviderCatalogResponse)
def list_providers(selector: ProcessorSelector = Depends(get_selector)):
    return provider_catalog(selector)


@router.get("/methods", response_model=MethodCatalogResponse)
def list_methods(selector: ProcessorSelector = Depends(get_selector)):
    return method_catalog(selector)
