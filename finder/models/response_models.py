from pydantic import BaseModel
from typing import Any, Dict, List, Optional

class ReducedRestaurant(BaseModel):
    name: Optional[str] = None
    location: Optional[Dict[str, Any]] = None
    cuisines: Optional[str] = None
    user_rating: Optional[Dict[str, Any]] = None
    price_range: Optional[Any] = None
    featured_image: Optional[str] = None
    menu_url: Optional[str] = None
    url: Optional[str] = None

class PageResponse(BaseModel):
    success: bool = True
    page: int
    limit: int
    total_results: int
    total_pages: int
    data: List[Dict[str, Any]]

class ImageSearchResponse(BaseModel):
    message: Optional[str] = None
    cuisines: List[str] = []
    restaurants: List[ReducedRestaurant] = []
