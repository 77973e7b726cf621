import os
from face_compare.errors import ImageLoadError, ConfigurationError

def load_image(path: str) -> bytes:
    try:
        with open(path, "rb") as f:
            size = os.fstat(f.fileno()).st_size
            return f.read(size)
    except OSError as e:
        raise ImageLoadError(path, details=e.strerror or str(e)) from e

def parse_number(name: str, value, cast=float, minimum=None, maximum=None):
    try:
        number = cast(value)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid {name}: {value!r}") from e

    if minimum is not None and number < minimum:
        raise ConfigurationError(f"Invalid {name}: {value!r} is below {minimum}")
    if maximum is not None and number > maximum:
        raise ConfigurationError(f"Invalid {name}: {value!r} is above {maximum}")
    return number

def parse_threshold(value) -> float:
    return parse_number("similarity threshold", value, float, minimum=0, maximum=100)
