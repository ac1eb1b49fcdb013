from fastapi import APIRouter

from devconnector.api.routes import auth, posts, profile, users

router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(auth.router, prefix="/auth", tags=["authentication"])
router.include_router(profile.router, prefix="/profile", tags=["profile"])
router.include_router(posts.router, prefix="/posts", tags=["posts"])
