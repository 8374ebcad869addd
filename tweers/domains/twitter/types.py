"""Value types for the Twitter domain."""

from typing import Any, Dict, List, Union

# Parsed JSON response body. Its shape belongs to the Twitter API and is not
# modelled here.
JsonValue = Union[Dict[str, Any], List[Any], str, int, float, bool, None]
