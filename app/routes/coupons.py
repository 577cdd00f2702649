from fastapi import APIRouter, Depends, HTTPException, Response, status

from app.dependencies.services import get_coupon_manager
from app.schemas.coupon_schemas import CouponResponse, CreateCouponRequest
from app.services.coupon_manager import CouponManager


router = APIRouter()


@router.post("/", response_model=CouponResponse, status_code=status.HTTP_201_CREATED)
def create_coupon(data: CreateCouponRequest, manager: CouponManager = Depends(get_coupon_manager)):
    return manager.create(data)


@router.get("/{coupon_id}", response_model=CouponResponse)
def get_coupon(coupon_id: str, manager: CouponManager = Depends(get_coupon_manager)):
    coupon = manager.find_by_id(coupon_id)
    if not coupon:
        raise HTTPException(status_code=404, detail="Coupon not found")
    return coupon


@router.delete("/{coupon_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_coupon(coupon_id: str, manager: CouponManager = Depends(get_coupon_manager)):
    manager.delete(coupon_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
