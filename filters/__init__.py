from .keyword_filter import FirmwareKeywordFilter, FIRMWARE_KEYWORDS
from .pipeline import FirmwarePipeline

__all__ = ["FirmwareKeywordFilter", "FIRMWARE_KEYWORDS", "FirmwarePipeline"]
