"""Seller CRUD endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.application.schemas import (
    SellerCreate,
    SellerListItemResponse,
    SellerResponse,
    SellerUpdate,
)
from app.application.services import SellerService
from app.domain.exceptions import EntityNotFoundError
from app.infrastructure.dependencies import get_seller_service

router = APIRouter(prefix="/sellers", tags=["Sellers"])


@router.get("", response_model=list[SellerListItemResponse])
async def list_sellers(
    search: str | None = Query(None, description="Match on name or email"),
    service: SellerService = Depends(get_seller_service),
) -> list[SellerListItemResponse]:
    return [
        SellerListItemResponse.model_validate(
            {**vars(o.seller), "project_count": o.project_count}
        )
        for o in service.list_sellers(search)
    ]


@router.get("/{seller_id}", response_model=SellerResponse)
async def get_seller(
    seller_id: str,
    service: SellerService = Depends(get_seller_service),
) -> SellerResponse:
    try:
        seller = service.get_seller(seller_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return SellerResponse.model_validate(seller, from_attributes=True)


@router.post("", response_model=SellerResponse, status_code=status.HTTP_201_CREATED)
async def create_seller(
    data: SellerCreate,
    service: SellerService = Depends(get_seller_service),
) -> SellerResponse:
    seller = service.create_seller(data)
    return SellerResponse.model_validate(seller, from_attributes=True)


@router.put("/{seller_id}", response_model=SellerResponse)
async def update_seller(
    seller_id: str,
    data: SellerUpdate,
    service: SellerService = Depends(get_seller_service),
) -> SellerResponse:
    try:
        seller = service.update_seller(seller_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return SellerResponse.model_validate(seller, from_attributes=True)


@router.delete("/{seller_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_seller(
    seller_id: str,
    service: SellerService = Depends(get_seller_service),
) -> None:
    try:
        service.delete_seller(seller_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
