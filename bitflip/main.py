from fastapi import FastAPI, APIRouter
from bitflip.api.bitflip_routes import router as bitflip_router
from fastapi.middleware.cors import CORSMiddleware

# Create FastAPI application instance
app = FastAPI(title="bitflip")

# Enable CORS middleware to allow frontend/backend communication
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Create a top-level APIRouter
router = APIRouter()

router.include_router(bitflip_router, prefix="/bitflip")

# Include the top-level router into the main FastAPI app with a global '/api' prefix
app.include_router(router, prefix="/api")
