from namevote.models.name import Name
from namevote.models.submission import Submission

__all__ = [
    "Name",
    "Submission",
]
