from metrika.Dimensions.information import (
    Bit,
    Byte,
    DataUnit,
    Gibibyte,
    Gigabyte,
    Kibibyte,
    Kilobyte,
    Mebibyte,
    Megabyte,
    Pebibyte,
    Petabyte,
    Tebibyte,
    Terabyte,
)


def test_base_unit():
    assert DataUnit.base_unit() is Byte
    assert Byte.to_base(42.0) == 42.0


def test_bits():
    assert Bit(8) == Byte(1)
    assert Byte(1).converted(Bit).value == 8.0
    assert Bit(1).converted(Byte).value == 0.125


def test_decimal_prefixes():
    assert Byte(1000) == Kilobyte(1)
    assert Kilobyte(1000) == Megabyte(1)
    assert Gigabyte(1).converted(Byte).value == 1e9
    assert Terabyte(1).converted(Byte).value == 1e12
    assert Petabyte(1).converted(Terabyte).value == 1000.0


def test_binary_prefixes():
    assert Byte(1024) == Kibibyte(1)
    assert Gibibyte(1).converted(Mebibyte).value == 1024.0
    assert Tebibyte(1).converted(Gibibyte).value == 1024.0
    assert Pebibyte(1).converted(Byte).value == 1024.0 ** 5


def test_decimal_and_binary_differ():
    assert Kilobyte(1) != Kibibyte(1)
    assert Mebibyte(1) > Megabyte(1)
    assert Gigabyte(1) < Gibibyte(1)
    assert Pebibyte(1) > Petabyte(1)


def test_display():
    assert str(Megabyte(512)) == "512.0 MB"
    assert str(Gibibyte(1.5)) == "1.5 GiB"


def test_symbols():
    assert [unit.symbol for unit in DataUnit] == [
        "B", "b", "KB", "MB", "GB", "TB", "PB", "KiB", "MiB", "GiB", "TiB", "PiB",
    ]
