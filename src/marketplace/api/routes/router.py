from fastapi import APIRouter

from src.marketplace.api.routes import admin, applications, auth, companies, projects, seed

api_router = APIRouter(prefix="/api")
api_router.include_router(auth.router)
api_router.include_router(companies.router)
api_router.include_router(projects.router)
api_router.include_router(applications.router)
api_router.include_router(admin.router)
api_router.include_router(seed.router)
