# Utility modules for the cookbook
from .validation import check_text, check_bool, check_tags
