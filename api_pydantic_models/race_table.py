"""
Pydantic models for the rendered race table and results modal.
Cells are display strings; the client only lays them out.
"""
from pydantic import BaseModel, Field
from typing import List, Optional


class Table(BaseModel):
    headers: List[str]
    rows: List[List[str]]


class ResultsModal(BaseModel):
    title: str = Field(..., description="Modal heading, e.g. 'Bahrain Grand Prix Results'")
    table: Table


class RaceTableView(BaseModel):
    """Response model for the rendered race table view."""
    status: str = Field(..., description="One of idle, loading, loaded, failed")
    message: Optional[str] = Field(None, description="Loading text or error shown instead of the table")
    race_table: Optional[Table] = Field(None, description="Season schedule, only once loaded")
    results_modal: Optional[ResultsModal] = Field(None, description="Present while the results modal is open")
