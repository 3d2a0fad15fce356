"""
Main API router for v1 endpoints
"""
from fastapi import APIRouter

from evaleads.api.v1.endpoints import leads, sms

api_router = APIRouter()

api_router.include_router(leads.router, tags=["leads"])
api_router.include_router(sms.router, tags=["sms"])
