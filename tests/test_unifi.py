from unifistats.unifi import (
    UDM,
    USW,
    Alarm,
    Client,
    DeviceStat,
    FlexBool,
    FlexInt,
    FlexTemp,
    Port,
    UAP,
    UXG,
)


def test_flexint_add_accumulates_sum():
    values = [1.5, 2.25, 10.0]
    total = FlexInt()
    for value in values:
        total.add(FlexInt(value))
    assert total.val == sum(values)


def test_flexint_add_refreshes_text():
    total = FlexInt(3)
    total.add(FlexInt(0.5))
    assert float(total.txt) == total.val


def test_flexint_add_leaves_other_untouched():
    other = FlexInt(4)
    FlexInt(1).add(other)
    assert other.val == 4.0


def test_flexint_as_int_truncates():
    assert FlexInt(7.9).as_int() == 7


def test_flexint_text_defaults():
    assert FlexInt().txt == ""
    assert FlexInt(5).txt == "5"
    assert FlexInt(5, "five").txt == "five"


def test_flexbool_as_float():
    assert FlexBool(True).as_float() == 1.0
    assert FlexBool(False).as_float() == 0.0


def test_flexbool_text_defaults():
    assert FlexBool().txt == ""
    assert FlexBool(True).txt == "true"


def test_flextemp_celsius_passthrough():
    assert FlexTemp(50).celsius() == 50


def test_flextemp_fahrenheit_conversion():
    assert FlexTemp(212, "F").celsius() == 100


def test_device_lists_not_shared():
    first = USW()
    second = USW()
    first.port_table.append(Port())
    assert second.port_table == []


def test_device_defaults():
    uap = UAP()
    assert uap.stat == DeviceStat()
    assert uap.stat.ap is None
    assert UDM().radio_table == []
    assert UXG().license_state == ""


def test_client_and_alarm_defaults():
    assert Client().is_wired.txt == ""
    alarm = Alarm()
    assert alarm.datetime is None
    assert alarm.dest_ip_geo.asn == 0