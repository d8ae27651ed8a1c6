from .pathing import tests_data_path

__all__ = ["tests_data_path"]
