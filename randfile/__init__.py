from randfile.creator import Outcome, Result, create_random_file
from randfile.size import parse_size

__all__ = ["Outcome", "Result", "create_random_file", "parse_size"]
