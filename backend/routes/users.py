# backend/routes/users.py
from typing import List

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from database import get_db
from services import users as user_service
from schemas.user import UserCreate, UserResponse
from utils.audit import client_ip, write_log

router = APIRouter(prefix="/users", tags=["Users"])


@router.post("", response_model=UserResponse, status_code=201)
def create_user(payload: UserCreate, request: Request, db: Session = Depends(get_db)):
    user = user_service.create_user(db, payload)
    write_log(
        db, user_id=user.id, action="USER_CREATE", resource="users", status="SUCCESS",
        ip=client_ip(request), meta={"username": user.username, "role": user.role}
    )
    return user


@router.get("", response_model=List[UserResponse])
def get_users(db: Session = Depends(get_db)):
    return user_service.get_users(db)
