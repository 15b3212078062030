from mlnutils.utils.io import LineStream, create_temp_file, create_temp_path, lines

__all__ = [
    "LineStream",
    "create_temp_file",
    "create_temp_path",
    "lines",
]
