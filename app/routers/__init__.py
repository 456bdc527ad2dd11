from .admin import router as admin_router
from .public import router as public_router

routes = [
    public_router,
    admin_router,
]
