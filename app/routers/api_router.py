from fastapi import APIRouter, Depends
from app.routers import auth, companies, jobs, users
from app.routers.auth_deps import authenticate_jwt

# Centralized API router hub
# Routers are aggregated here, and main.py only imports this single hub.
# Every request passes through authenticate_jwt; endpoints add their own checks.
api_router = APIRouter(dependencies=[Depends(authenticate_jwt)])

api_router.include_router(auth.router, tags=["Authentication"])
api_router.include_router(companies.router, tags=["Companies"])
api_router.include_router(jobs.router, tags=["Jobs"])
api_router.include_router(users.router, tags=["Users"])
