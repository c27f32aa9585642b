from datetime import datetime

from pydantic import BaseModel, ConfigDict

from cityweather.utils.time import TimeUtils


class ProviderModel(BaseModel):
    """Base model for records decoded from OpenWeather JSON.

    Records are immutable once decoded. Keys the provider sends but the
    model does not declare are ignored.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class TimeStampModel(ProviderModel):
    """Base model with timestamp conversion utilities.

    Timestamps are kept as the raw UNIX seconds sent by the provider so a
    decoded record mirrors its source JSON; this class converts them to
    datetime objects with consistent timezone handling.
    """

    @classmethod
    def convert_timestamp(cls, v: int) -> datetime:
        """Convert UNIX timestamp to UTC datetime with timezone information.

        Args:
            v: UNIX timestamp (seconds since epoch)

        Returns:
            datetime: Timezone-aware datetime object in UTC
        """
        return TimeUtils.epoch_to_datetime(v)
