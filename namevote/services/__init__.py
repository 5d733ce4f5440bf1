from namevote.services.results import list_names, list_submissions, tally_votes
from namevote.services.submissions import add_name, is_admin_key, submit_vote

__all__ = [
    "add_name",
    "is_admin_key",
    "list_names",
    "list_submissions",
    "submit_vote",
    "tally_votes",
]
