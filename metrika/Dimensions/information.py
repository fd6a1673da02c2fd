from metrika.core import LinearUnit, Measurement


class DataUnit(LinearUnit):
    """Units of data size, with the byte as base unit.

    Decimal (SI) prefixes step by 1000 and binary (IEC) prefixes by 1024, so a kilobyte and a
    kibibyte are different sizes and never compare equal.
    """

    Byte = ("B", 1.0, 1.0)
    Bit = ("b", 1.0, 8.0)

    Kilobyte = ("KB", 1000.0, 1.0)
    Megabyte = ("MB", 1_000_000.0, 1.0)
    Gigabyte = ("GB", 1_000_000_000.0, 1.0)
    Terabyte = ("TB", 1_000_000_000_000.0, 1.0)
    Petabyte = ("PB", 1_000_000_000_000_000.0, 1.0)

    Kibibyte = ("KiB", 1024.0, 1.0)
    Mebibyte = ("MiB", 1_048_576.0, 1.0)
    Gibibyte = ("GiB", 1_073_741_824.0, 1.0)
    Tebibyte = ("TiB", 1_099_511_627_776.0, 1.0)
    Pebibyte = ("PiB", 1_125_899_906_842_624.0, 1.0)

    @classmethod
    def base_unit(cls) -> "DataUnit":
        return cls.Byte

    @property
    def allows_negative_base(self) -> bool:
        return False


DataSize = Measurement[DataUnit]

Byte = DataUnit.Byte  # Base unit
Bit = DataUnit.Bit
Kilobyte = DataUnit.Kilobyte
Megabyte = DataUnit.Megabyte
Gigabyte = DataUnit.Gigabyte
Terabyte = DataUnit.Terabyte
Petabyte = DataUnit.Petabyte
Kibibyte = DataUnit.Kibibyte
Mebibyte = DataUnit.Mebibyte
Gibibyte = DataUnit.Gibibyte
Tebibyte = DataUnit.Tebibyte
Pebibyte = DataUnit.Pebibyte
