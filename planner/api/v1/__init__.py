"""API v1 router aggregation."""

from fastapi import APIRouter

from planner.api.v1.endpoints import (
    exercise_muscles,
    exercises,
    health,
    muscle_categories,
    muscles,
    plans,
    set_exercises,
    sets,
    sink,
    workouts,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(sink.router, prefix="/sink", tags=["sink"])
api_router.include_router(plans.router, prefix="/plan", tags=["plan"])
api_router.include_router(workouts.router, prefix="/workout", tags=["workout"])
api_router.include_router(sets.router, prefix="/set", tags=["set"])
api_router.include_router(set_exercises.router, prefix="/set-exercises", tags=["set-exercises"])
api_router.include_router(exercises.router, prefix="/exercise", tags=["exercise"])
api_router.include_router(exercise_muscles.router, prefix="/exercise-muscles", tags=["exercise-muscles"])
api_router.include_router(muscles.router, prefix="/muscle", tags=["muscle"])
api_router.include_router(muscle_categories.router, prefix="/muscle-category", tags=["muscle-category"])
