from pydantic import BaseModel, ConfigDict

class AppBaseModel(BaseModel):
    """
    Global base model for the application.
    Centralizes Pydantic configuration (strict mode, stripping, etc.).
    """
    model_config = ConfigDict(
        strict=True,                # No implicit type coercion (ex: "1" != 1)
        str_strip_whitespace=True,  # Auto-strip whitespace from strings
        validate_assignment=True,   # Validate values even when setting attributes after creation
        populate_by_name=True,      # Accept field names as well as camelCase aliases
        frozen=False                # Allow mutation (default)
    )
