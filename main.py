from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware
from core.config_loader import settings
from core.logging_config import configure_logging

from organization.router import organization_router
from employee.router import employee_router
from leavetype.router import leavetype_router
from availability.router import availability_router
from leave.router import leave_router
from scheduling.router import resolution_router
import models_bootstrap

configure_logging()

openapi_tags = [
    {
        "name": "Availability Resolution",
        "description": "Working intervals resolved from weekly windows and leave",
    },
    {
        "name": "Health Checks",
        "description": "Application health checks",
    }
]

app = FastAPI(title=settings.PROJECT_NAME, openapi_tags=openapi_tags)

if settings.BACKEND_CORS_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            str(origin).strip("/") for origin in settings.BACKEND_CORS_ORIGINS
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

# resolution_router first: /availability/resolve must win over /availability/{window_id}
app.include_router(resolution_router, prefix="/api")
app.include_router(organization_router, prefix="/api")
app.include_router(employee_router, prefix="/api")
app.include_router(leavetype_router, prefix="/api")
app.include_router(availability_router, prefix="/api")
app.include_router(leave_router, prefix="/api")



@app.get("/health", tags=['Health Checks'])
def read_root():
    return {"health": "true"}
