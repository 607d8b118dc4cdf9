from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.symptoms.routes import router as symptoms_router
from app.medicines.routes import router as medicines_router
from app.doctor.routes import router as doctor_router
from app.companion.routes import router as companion_router
from app.skin.routes import router as skin_router
from app.prescriptions.routes import router as prescriptions_router
from app.summarizer.routes import router as summarizer_router
from app.analytics.routes import router as analytics_router
from app.resources.routes import router as resources_router
from app.auth.routes import router as auth_router
from app.pharmacy.routes import router as pharmacy_router
from app.payments.routes import router as payments_router
from app.database.schema_setup import setup_error_log_indexes
from app.database.mongo import close_client
import uvicorn

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Set up error log indexes on startup, close MongoDB on shutdown"""
    await setup_error_log_indexes()
    yield
    await close_client()

app = FastAPI(
    title="Health Assistant API",
    description="AI health assistant: symptom analysis, medicine info, prescriptions, health analytics and a mock pharmacy",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(symptoms_router)
app.include_router(medicines_router)
app.include_router(doctor_router)
app.include_router(companion_router)
app.include_router(skin_router)
app.include_router(prescriptions_router)
app.include_router(summarizer_router)
app.include_router(analytics_router)
app.include_router(resources_router)
app.include_router(auth_router)
app.include_router(pharmacy_router)
app.include_router(payments_router)

@app.get("/")
async def root():
    return {"message": "Health Assistant API is running"}

@app.get("/health")
async def health_check():
    return {"status": "healthy"}

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8001)
