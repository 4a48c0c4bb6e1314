"""Image metadata stored on documents."""

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr


class ImageMetadata(BaseModel):
    """Descriptor of one uploaded image, embedded in the owning document."""

    model_config = ConfigDict(populate_by_name=True)

    id: StrictStr = Field(..., description="Unique image identifier")
    ext: StrictStr = Field(..., description="Normalized lowercase file extension")
    path: StrictStr = Field(..., description="Object key inside the bucket")
    url: StrictStr = Field(..., description="Public URL of the original image")
    thumb_url: StrictStr = Field(
        ..., alias="thumbUrl", description="URL of the thumbnail rendition"
    )
    name: StrictStr = Field("", description="Original file name, may be empty")
    size: StrictInt = Field(..., description="Image size in bytes")
