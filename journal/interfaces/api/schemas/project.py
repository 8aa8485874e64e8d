"""Pydantic schemas for project and contact endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ProjectCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    description: str | None = None


class ProjectRead(BaseModel):
    id: int
    name: str
    description: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class ContactCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=150)
    title: str | None = Field(default=None, max_length=150)
    company: str | None = Field(default=None, max_length=200)
    email: str | None = Field(default=None, max_length=254)
    phone: str | None = Field(default=None, max_length=50)
    notes: str | None = None


class ContactRead(BaseModel):
    id: int
    name: str
    title: str | None = None
    company: str | None = None
    email: str | None = None
    phone: str | None = None
    notes: str | None = None

    model_config = ConfigDict(from_attributes=True)


__all__ = ["ContactCreate", "ContactRead", "ProjectCreate", "ProjectRead"]
