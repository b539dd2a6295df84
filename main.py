"""
Powerplay Cup - Cricket Tournament Simulation API
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from powerplay import __version__
from powerplay.config import settings
from powerplay.api.match import router as match_router
from powerplay.api.tournament import router as tournament_router

# Initialize FastAPI app
app = FastAPI(
    title="Powerplay Cup",
    description="Miniature Cricket Tournament Simulation API",
    version=__version__,
)

# CORS origins - configurable via environment variable
default_origins = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]

# Add custom origins from environment (comma-separated)
if settings.CORS_ORIGINS:
    default_origins.extend([o.strip() for o in settings.CORS_ORIGINS.split(",") if o.strip()])

app.add_middleware(
    CORSMiddleware,
    allow_origins=default_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(match_router, prefix="/api")
app.include_router(tournament_router, prefix="/api")


@app.get("/")
def root():
    """Health check endpoint"""
    return {
        "name": "Powerplay Cup API",
        "version": __version__,
        "status": "running",
    }


@app.get("/api/health")
def health_check():
    """API health check"""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
