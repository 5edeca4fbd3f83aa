from typing import List

from fastapi import APIRouter

from rapidjobs.routers.routes import waitlist_router

router = APIRouter(prefix="/api")

routers_to_include: List[APIRouter] = [
    # This is the order they show up in openapi.json
    waitlist_router.router,
]

for router_to_include in routers_to_include:
    router.include_router(router_to_include)
