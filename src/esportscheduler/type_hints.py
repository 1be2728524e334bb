"""Type hints used in Esports Scheduler."""

from datetime import date, datetime
from typing import Dict, List, Union

# Anything the date validator accepts: a date, a datetime or a parseable string
DateLike = Union[date, datetime, str]

# Plain-data overview rows, one dict per entity
SummaryRows = List[Dict[str, object]]
