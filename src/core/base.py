from src.utils.logger import get_logger


class BaseService:
    """Base service class providing a class-named logger."""

    def __init__(self):
        self.logger = get_logger(self.__class__.__name__)
