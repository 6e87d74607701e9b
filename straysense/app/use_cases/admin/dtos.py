from pydantic import BaseModel


class AdminTokenResponse(BaseModel):
    token: str


class DashboardStatsResponse(BaseModel):
    """Counters shown on the admin dashboard"""

    totalUsers: int
    totalAnimals: int
    activeReports: int
    totalShelters: int
    activeAdoptionRequests: int
    pendingVaccinations: int
