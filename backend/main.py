import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import settings
from api.routes_search import router as routes_router
from api.geocode_routes import router as geocode_router
from api.emissions_routes import router as emissions_router
from api.status import router as status_router

logging.basicConfig(level=settings.LOG_LEVEL)

app = FastAPI(title="Eco Route Backend")

# CORS (adjust for your frontend)
origins = settings.CORS_ALLOW_ORIGINS.split(",")
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register API routes
app.include_router(routes_router)
app.include_router(geocode_router)
app.include_router(emissions_router)
app.include_router(status_router)

if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="127.0.0.1", port=8000, reload=True)
