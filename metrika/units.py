# Import Units for Easy Access
from metrika.core import Measurement, Unit, convert
from metrika.Dimensions.spatial import *
from metrika.Dimensions.mass import *
from metrika.Dimensions.temporal import *
from metrika.Dimensions.temperature import *
from metrika.Dimensions.information import *


UNIT_TYPES = (LengthUnit, MassUnit, TimeUnit, TemperatureUnit, DataUnit)
"""Every unit descriptor shipped with metrika."""


def AllUnits():
    """Returns every unit of every descriptor, grouped by descriptor.

    :return: A list of every unit.
    :rtype: list[:class:`Unit`]
    """
    return [unit for unit_type in UNIT_TYPES for unit in unit_type]
