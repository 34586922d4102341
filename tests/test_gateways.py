from unifistats.gateways import (
    batch_net_table,
    batch_udm,
    batch_usg,
    batch_usg_stats,
    batch_usg_wans,
    batch_uxg,
)
from unifistats.report import Item, Report
from unifistats.unifi import (
    UDM,
    USG,
    UXG,
    VAP,
    Ap,
    DeviceStat,
    FlexBool,
    FlexInt,
    Gw,
    Network,
    Port,
    Radio,
    SpeedtestStatus,
    Storage,
    Sw,
    Uplink,
    Wan,
)


class FakeClient:
    def __init__(self):
        self.gauges = []

    def gauge(self, name, value, tags, rate):
        self.gauges.append((name, value, list(tags)))


def make_report():
    client = FakeClient()
    return Report(client=client), client


def names(client):
    return {name for name, _, _ in client.gauges}


def find(client, name):
    return [(value, tags) for n, value, tags in client.gauges if n == name]


def adopted(**kwargs):
    return dict(adopted=FlexBool(True), **kwargs)


def test_usg_not_adopted_sends_nothing():
    report, client = make_report()
    batch_usg(report, USG(name="gw1", bytes=FlexInt(5)))
    assert client.gauges == []
    assert report.counts.val == {}


def test_usg_locating_sends_nothing():
    report, client = make_report()
    batch_usg(report, USG(**adopted(locating=FlexBool(True))))
    assert client.gauges == []


def test_usg_adopted_sends_gauges_and_counts():
    report, client = make_report()
    device = USG(
        **adopted(
            name="gw1",
            mac="00:00:5e:00:53:01",
            license_state="registered",
            bytes=FlexInt(1234),
            upgradeable=FlexBool(True),
        )
    )
    batch_usg(report, device)
    assert report.counts.val[Item.USG] == 1
    [(value, tags)] = find(client, "unifi.usg.bytes")
    assert value == 1234.0
    assert "license_state:registered" in tags
    assert "name:gw1" in tags
    # USG tags are not cleaned of empty values.
    assert "version:" in tags
    assert find(client, "unifi.usg.upgradeable")[0][0] == 1.0


def test_usg_without_gw_stats_has_no_lan_gauges():
    report, client = make_report()
    batch_usg(report, USG(**adopted(stat=DeviceStat())))
    assert "unifi.usg.lan_rx_bytes" not in names(client)
    assert "unifi.usg.uptime" in names(client)


def test_usg_stats_empty_without_gateway():
    assert batch_usg_stats(SpeedtestStatus(), None, Uplink()) == {}


def test_usg_stats_values():
    data = batch_usg_stats(
        SpeedtestStatus(xput_download=FlexInt(940), status_ping=FlexInt(7)),
        Gw(lan_rx_bytes=FlexInt(77)),
        Uplink(latency=FlexInt(3), speed=FlexInt(1000)),
    )
    assert data["speedtest_status_xput_download"] == 940.0
    assert data["speedtest_status_ping"] == 7.0
    assert data["lan_rx_bytes"] == 77.0
    assert data["uplink_speed"] == 1000.0
    assert data["uplink_latency"] == 3.0
    assert len(data) == 13


def test_wans_skip_down_ports():
    report, client = make_report()
    batch_usg_wans(report, {"name": "gw1"}, Wan(name="wan"), Wan(name="wan2"))
    assert client.gauges == []


def test_wans_up_port():
    report, client = make_report()
    wan = Wan(
        name="wan",
        ifname="eth0",
        up=FlexBool(True),
        full_duplex=FlexBool(True),
        rx_bytes=FlexInt(900),
    )
    batch_usg_wans(report, {"name": "gw1", "site_name": "default"}, wan, Wan())
    [(value, tags)] = find(client, "unifi.usg.wan_ports.rx_bytes")
    assert value == 900.0
    assert "device_name:gw1" in tags
    assert "purpose:wan" in tags
    assert "ifname:eth0" in tags
    assert "up:true" in tags
    assert not any(t.startswith("gateway:") for t in tags)
    assert find(client, "unifi.usg.wan_ports.full_duplex")[0][0] == 1.0


def test_net_table():
    report, client = make_report()
    networks = [
        Network(name="lan", num_sta=FlexInt(12)),
        Network(name="guest", num_sta=FlexInt(3), is_guest=FlexBool(True)),
    ]
    batch_net_table(report, {"name": "gw1", "source": "ctrl"}, networks)
    found = find(client, "unifi.usg.networks.num_sta")
    assert [value for value, _ in found] == [12.0, 3.0]
    assert "name:lan" in found[0][1]
    assert "source:ctrl" in found[0][1]
    assert "is_guest:true" in found[1][1]
    assert not any(t.startswith("is_guest:") for t in found[0][1])


def test_udm_without_ap_stats_has_no_uap_gauges():
    report, client = make_report()
    device = UDM(
        **adopted(
            name="udm",
            stat=DeviceStat(sw=Sw(tx_bytes=FlexInt(55)), gw=Gw()),
            port_table=[
                Port(name="p1", up=FlexBool(True), enable=FlexBool(True), port_idx=FlexInt(1)),
                Port(name="p2", port_idx=FlexInt(2)),
            ],
        )
    )
    batch_udm(report, device, False)
    assert report.counts.val[Item.UDM] == 1
    assert not any(n.startswith("unifi.uap.") for n in names(client))
    assert find(client, "unifi.usw.stat_tx_bytes")[0][0] == 55.0
    assert "unifi.usg.lan_rx_bytes" in names(client)
    ports = find(client, "unifi.usw.ports.speed")
    assert len(ports) == 1
    assert "port_id:udm Port 1" in ports[0][1]


def test_udm_dead_ports_are_kept_when_asked():
    report, client = make_report()
    device = UDM(**adopted(port_table=[Port(name="p1"), Port(name="p2")]))
    batch_udm(report, device, True)
    assert len(find(client, "unifi.usw.ports.speed")) == 2


def test_udm_with_ap_stats_sends_radio_and_vap_gauges():
    report, client = make_report()
    device = UDM(
        **adopted(
            name="udm",
            num_sta=FlexInt(9),
            stat=DeviceStat(ap=Ap(rx_bytes=FlexInt(31))),
            radio_table=[Radio(name="wifi0", radio="ng")],
            vap_table=[VAP(essid="home")],
        )
    )
    batch_udm(report, device, False)
    assert find(client, "unifi.uap.stat_rx_bytes")[0][0] == 31.0
    assert find(client, "unifi.uap.num_sta")[0][0] == 9.0
    assert "unifi.uap_radios.nss" in names(client)
    vaps = find(client, "unifi.uap_vaps.rx_bytes")
    assert len(vaps) == 1
    assert "essid:home" in vaps[0][1]


def test_udm_storage_gauges_and_clean_tags():
    report, client = make_report()
    device = UDM(
        **adopted(
            name="udm",
            storage=[Storage(name="Data", size=FlexInt(200), used=FlexInt(50))],
        )
    )
    batch_udm(report, device, False)
    assert find(client, "unifi.usg.storage_data_size")[0][0] == 200.0
    assert find(client, "unifi.usg.storage_data_used")[0][0] == 50.0
    assert "unifi.usg.storage_data_pct" in names(client)
    tags = find(client, "unifi.usg.bytes")[0][1]
    assert "version:" not in tags
    assert "name:udm" in tags


def test_udm_not_adopted_sends_nothing():
    report, client = make_report()
    batch_udm(report, UDM(name="udm"), True)
    assert client.gauges == []
    assert Item.UDM not in report.counts.val


def test_uxg_without_stat():
    report, client = make_report()
    device = UXG(**adopted(name="uxg", stat=None, uptime=FlexInt(60)))
    batch_uxg(report, device, False)
    assert report.counts.val[Item.UXG] == 1
    assert find(client, "unifi.usg.uptime")[0][0] == 60.0
    assert find(client, "unifi.usw.uptime")[0][0] == 60.0
    assert "unifi.usg.upgradeable" not in names(client)
    assert "unifi.usw.upgradeable" not in names(client)
    assert "unifi.usg.lan_rx_bytes" not in names(client)
    assert "unifi.usw.stat_bytes" not in names(client)


def test_uxg_with_stats():
    report, client = make_report()
    device = UXG(
        **adopted(
            name="uxg",
            stat=DeviceStat(gw=Gw(lan_tx_bytes=FlexInt(8)), sw=Sw(bytes=FlexInt(4))),
            wan1=Wan(up=FlexBool(True), name="wan"),
        )
    )
    batch_uxg(report, device, False)
    assert find(client, "unifi.usg.lan_tx_bytes")[0][0] == 8.0
    assert find(client, "unifi.usw.stat_bytes")[0][0] == 4.0
    assert len(find(client, "unifi.usg.wan_ports.speed")) == 1


def test_uxg_not_adopted_sends_nothing():
    report, client = make_report()
    batch_uxg(report, UXG(**adopted(locating=FlexBool(True))), False)
    assert client.gauges == []