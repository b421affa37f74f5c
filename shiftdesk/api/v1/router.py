# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Main API router for v1 endpoints."""

from fastapi import APIRouter

from shiftdesk.api.v1 import auth, employees, issues, shifts

api_router = APIRouter()

# Auth routes
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])

# Employee routes
api_router.include_router(employees.router, prefix="/employees", tags=["employees"])

# Shift routes
api_router.include_router(shifts.router, prefix="/shifts", tags=["shifts"])

# Issue routes
api_router.include_router(issues.router, prefix="/issues", tags=["issues"])
