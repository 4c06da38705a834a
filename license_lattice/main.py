from fastapi import FastAPI
from license_lattice.api.licenses import router as licenses_router
from license_lattice.core.logging_config import configure_logging

configure_logging()

app = FastAPI(
    title="License Lattice Policy Checker",
    version="1.0.0",
)

# main API
app.include_router(licenses_router, prefix="/api", tags=["Licenses"])

# quick health check
@app.get("/")
def root():
    return {"message": "License Lattice Backend is running"}
