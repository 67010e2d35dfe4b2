"""
Error taxonomy shared by every stage of the pipeline.

  ValidationError     — malformed input, missing file, unsupported image format
  LabelingError       — image-to-text call failed or returned nothing
  ConfigurationError  — unknown provider / model, or missing AI credential
  SearchError         — shopping search failed or SERPAPI_API_KEY missing

find_product.py turns the first three into an AnalysisFailure.
SearchError is never caught there — the caller decides what to do with it.
"""


class ProductFinderError(Exception):
    """Base class for all errors raised by this project."""


class ValidationError(ProductFinderError):
    pass


class LabelingError(ProductFinderError):
    pass


class ConfigurationError(ProductFinderError):
    pass


class SearchError(ProductFinderError):
    pass
