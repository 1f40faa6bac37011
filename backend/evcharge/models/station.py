"""Charging station model."""
import enum
from sqlalchemy import String, Float, Enum, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column
from evcharge.models.base import Base, CreatedAtMixin


class StationStatus(str, enum.Enum):
    """Operational status of a charging station."""
    ACTIVE = "Active"
    INACTIVE = "Inactive"


class ChargingStation(Base, CreatedAtMixin):
    """A charging point with location, power rating and connector type."""
    __tablename__ = "charging_stations"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    latitude: Mapped[float] = mapped_column(Float, nullable=False)
    longitude: Mapped[float] = mapped_column(Float, nullable=False)

    # Stored as VARCHAR with a CHECK constraint on the two values
    status: Mapped[StationStatus] = mapped_column(
        Enum(
            StationStatus,
            name="station_status",
            native_enum=False,
            create_constraint=True,
            length=20,
            values_callable=lambda x: [e.value for e in x],
        ),
        nullable=False,
    )

    # kW
    power_output: Mapped[float] = mapped_column(Float, nullable=False)
    connector_type: Mapped[str] = mapped_column(String(50), nullable=False)

    created_by: Mapped[int | None] = mapped_column(ForeignKey("users.id"), nullable=True)

    def __repr__(self):
        return f"<ChargingStation(id={self.id}, name={self.name}, status={self.status})>"
