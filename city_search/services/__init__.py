"""Services layer - Application orchestration.

Services coordinate the ports to implement the page behaviour:
- CityLookupService: name search, details and coordinate lookups
- CityLookupController: page state transitions driven by the UI
"""

from .city_lookup import CityLookupService
from .page_controller import CityLookupController, PageState

__all__ = ["CityLookupService", "CityLookupController", "PageState"]
