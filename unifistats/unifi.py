"""Data model for the measurements a UniFi controller reports."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


def _format_number(value: float) -> str:
    """Render a number the shortest way, without a trailing ``.0``."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


@dataclass
class FlexInt:
    """A number that the controller may send as a number or as text.

    ``txt`` defaults to the text form of a non-zero ``val`` and to the empty
    string for zero, which is how an absent value looks.
    """

    val: float = 0.0
    txt: str | None = None

    def __post_init__(self) -> None:
        self.val = float(self.val)
        if self.txt is None:
            self.txt = _format_number(self.val) if self.val else ""

    def add(self, other: FlexInt) -> None:
        """Add another value to this one in place and refresh the text."""
        self.val += other.val
        self.txt = _format_number(self.val)

    def as_int(self) -> int:
        """Return the value truncated to an integer."""
        return int(self.val)


@dataclass
class FlexBool:
    """A boolean that the controller may send as a bool, number or text.

    ``txt`` defaults to ``"true"`` for a true value and to the empty string
    otherwise.
    """

    val: bool = False
    txt: str | None = None

    def __post_init__(self) -> None:
        self.val = bool(self.val)
        if self.txt is None:
            self.txt = "true" if self.val else ""

    def as_float(self) -> float:
        """Return 1.0 for true and 0.0 for false."""
        return 1.0 if self.val else 0.0


@dataclass
class FlexTemp:
    """A temperature reading with its unit, ``C`` or ``F``."""

    val: float = 0.0
    unit: str = "C"

    def celsius(self) -> float:
        """Return the reading in degrees Celsius."""
        if self.unit.strip().upper() == "F":
            return (self.val - 32) * 5 / 9
        return float(self.val)


def _fi():
    return field(default_factory=FlexInt)


def _fb():
    return field(default_factory=FlexBool)


@dataclass
class IPGeo:
    asn: int = 0
    latitude: float = 0.0
    longitude: float = 0.0
    city: str = ""
    continent_code: str = ""
    country_code: str = ""
    country_name: str = ""
    organization: str = ""


@dataclass
class Temperature:
    name: str = ""
    type: str = ""
    value: float = 0.0


@dataclass
class Storage:
    name: str = ""
    mount_point: str = ""
    size: FlexInt = _fi()
    used: FlexInt = _fi()


@dataclass
class SysStats:
    loadavg_1: FlexInt = _fi()
    loadavg_5: FlexInt = _fi()
    loadavg_15: FlexInt = _fi()
    mem_used: FlexInt = _fi()
    mem_buffer: FlexInt = _fi()
    mem_total: FlexInt = _fi()


@dataclass
class SystemStats:
    cpu: FlexInt = _fi()
    mem: FlexInt = _fi()
    uptime: FlexInt = _fi()
    temps: dict[str, FlexTemp] = field(default_factory=dict)


@dataclass
class Sw:
    bytes: FlexInt = _fi()
    rx_bytes: FlexInt = _fi()
    rx_crypts: FlexInt = _fi()
    rx_dropped: FlexInt = _fi()
    rx_errors: FlexInt = _fi()
    rx_frags: FlexInt = _fi()
    rx_packets: FlexInt = _fi()
    tx_bytes: FlexInt = _fi()
    tx_dropped: FlexInt = _fi()
    tx_errors: FlexInt = _fi()
    tx_packets: FlexInt = _fi()
    tx_retries: FlexInt = _fi()


@dataclass
class Gw:
    lan_rx_bytes: FlexInt = _fi()
    lan_rx_packets: FlexInt = _fi()
    lan_tx_bytes: FlexInt = _fi()
    lan_tx_packets: FlexInt = _fi()
    lan_rx_dropped: FlexInt = _fi()


@dataclass
class Ap:
    user_rx_packets: FlexInt = _fi()
    guest_rx_packets: FlexInt = _fi()
    rx_packets: FlexInt = _fi()
    user_rx_bytes: FlexInt = _fi()
    guest_rx_bytes: FlexInt = _fi()
    rx_bytes: FlexInt = _fi()
    user_rx_errors: FlexInt = _fi()
    guest_rx_errors: FlexInt = _fi()
    rx_errors: FlexInt = _fi()
    user_rx_dropped: FlexInt = _fi()
    guest_rx_dropped: FlexInt = _fi()
    rx_dropped: FlexInt = _fi()
    user_rx_crypts: FlexInt = _fi()
    guest_rx_crypts: FlexInt = _fi()
    rx_crypts: FlexInt = _fi()
    user_rx_frags: FlexInt = _fi()
    guest_rx_frags: FlexInt = _fi()
    rx_frags: FlexInt = _fi()
    user_tx_packets: FlexInt = _fi()
    guest_tx_packets: FlexInt = _fi()
    tx_packets: FlexInt = _fi()
    user_tx_bytes: FlexInt = _fi()
    guest_tx_bytes: FlexInt = _fi()
    tx_bytes: FlexInt = _fi()
    user_tx_errors: FlexInt = _fi()
    guest_tx_errors: FlexInt = _fi()
    tx_errors: FlexInt = _fi()
    user_tx_dropped: FlexInt = _fi()
    guest_tx_dropped: FlexInt = _fi()
    tx_dropped: FlexInt = _fi()
    user_tx_retries: FlexInt = _fi()
    guest_tx_retries: FlexInt = _fi()


@dataclass
class Uplink:
    name: str = ""
    type: str = ""
    latency: FlexInt = _fi()
    speed: FlexInt = _fi()


@dataclass
class SpeedtestStatus:
    latency: FlexInt = _fi()
    runtime: FlexInt = _fi()
    rundate: FlexInt = _fi()
    status_ping: FlexInt = _fi()
    xput_download: FlexInt = _fi()
    xput_upload: FlexInt = _fi()


@dataclass
class DeviceStat:
    sw: Sw | None = None
    gw: Gw | None = None
    ap: Ap | None = None


@dataclass
class Port:
    name: str = ""
    poe_mode: str = ""
    media: str = ""
    sfp_compliance: str = ""
    sfp_serial: str = ""
    sfp_vendor: str = ""
    sfp_part: str = ""
    up: FlexBool = _fb()
    enable: FlexBool = _fb()
    port_poe: FlexBool = _fb()
    poe_enable: FlexBool = _fb()
    flowctrl_rx: FlexBool = _fb()
    flowctrl_tx: FlexBool = _fb()
    sfp_found: FlexBool = _fb()
    port_idx: FlexInt = _fi()
    bytes_r: FlexInt = _fi()
    rx_broadcast: FlexInt = _fi()
    rx_bytes: FlexInt = _fi()
    rx_bytes_r: FlexInt = _fi()
    rx_dropped: FlexInt = _fi()
    rx_errors: FlexInt = _fi()
    rx_multicast: FlexInt = _fi()
    rx_packets: FlexInt = _fi()
    speed: FlexInt = _fi()
    stp_pathcost: FlexInt = _fi()
    tx_broadcast: FlexInt = _fi()
    tx_bytes: FlexInt = _fi()
    tx_bytes_r: FlexInt = _fi()
    tx_dropped: FlexInt = _fi()
    tx_errors: FlexInt = _fi()
    tx_multicast: FlexInt = _fi()
    tx_packets: FlexInt = _fi()
    poe_current: FlexInt = _fi()
    poe_power: FlexInt = _fi()
    poe_voltage: FlexInt = _fi()
    sfp_current: FlexInt = _fi()
    sfp_voltage: FlexInt = _fi()
    sfp_temperature: FlexInt = _fi()
    sfp_txpower: FlexInt = _fi()
    sfp_rxpower: FlexInt = _fi()


@dataclass
class Wan:
    ip: str = ""
    name: str = ""
    mac: str = ""
    ifname: str = ""
    type: str = ""
    gateway: str = ""
    up: FlexBool = _fb()
    enable: FlexBool = _fb()
    full_duplex: FlexBool = _fb()
    is_uplink: FlexBool = _fb()
    bytes_r: FlexInt = _fi()
    max_speed: FlexInt = _fi()
    rx_bytes: FlexInt = _fi()
    rx_bytes_r: FlexInt = _fi()
    rx_dropped: FlexInt = _fi()
    rx_errors: FlexInt = _fi()
    rx_broadcast: FlexInt = _fi()
    rx_multicast: FlexInt = _fi()
    rx_packets: FlexInt = _fi()
    speed: FlexInt = _fi()
    tx_bytes: FlexInt = _fi()
    tx_bytes_r: FlexInt = _fi()
    tx_dropped: FlexInt = _fi()
    tx_errors: FlexInt = _fi()
    tx_packets: FlexInt = _fi()
    tx_broadcast: FlexInt = _fi()
    tx_multicast: FlexInt = _fi()


@dataclass
class Network:
    ip: str = ""
    mac: str = ""
    name: str = ""
    domain_name: str = ""
    purpose: str = ""
    up: FlexBool = _fb()
    enabled: FlexBool = _fb()
    is_guest: FlexBool = _fb()
    num_sta: FlexInt = _fi()
    rx_bytes: FlexInt = _fi()
    rx_packets: FlexInt = _fi()
    tx_bytes: FlexInt = _fi()
    tx_packets: FlexInt = _fi()


@dataclass
class VAP:
    ap_mac: str = ""
    bssid: str = ""
    id: str = ""
    name: str = ""
    radio_name: str = ""
    radio: str = ""
    essid: str = ""
    site_id: str = ""
    usage: str = ""
    state: str = ""
    is_guest: FlexBool = _fb()
    ccq: int = 0
    mac_filter_rejections: int = 0
    num_sta: int = 0
    num_satisfaction_sta: FlexInt = _fi()
    avg_client_signal: FlexInt = _fi()
    satisfaction: FlexInt = _fi()
    satisfaction_now: FlexInt = _fi()
    channel: FlexInt = _fi()
    rx_bytes: FlexInt = _fi()
    rx_crypts: FlexInt = _fi()
    rx_dropped: FlexInt = _fi()
    rx_errors: FlexInt = _fi()
    rx_frags: FlexInt = _fi()
    rx_nwids: FlexInt = _fi()
    rx_packets: FlexInt = _fi()
    tx_bytes: FlexInt = _fi()
    tx_dropped: FlexInt = _fi()
    tx_errors: FlexInt = _fi()
    tx_packets: FlexInt = _fi()
    tx_power: FlexInt = _fi()
    tx_retries: FlexInt = _fi()
    tx_combined_retries: FlexInt = _fi()
    tx_data_mpdu_bytes: FlexInt = _fi()
    tx_rts_retries: FlexInt = _fi()
    tx_success: FlexInt = _fi()
    tx_total: FlexInt = _fi()
    tx_tcp_goodbytes: FlexInt = _fi()
    tx_tcp_lat_avg: FlexInt = _fi()
    tx_tcp_lat_max: FlexInt = _fi()
    tx_tcp_lat_min: FlexInt = _fi()
    rx_tcp_goodbytes: FlexInt = _fi()
    rx_tcp_lat_avg: FlexInt = _fi()
    rx_tcp_lat_max: FlexInt = _fi()
    rx_tcp_lat_min: FlexInt = _fi()
    wifi_tx_latency_mov_avg: FlexInt = _fi()
    wifi_tx_latency_mov_max: FlexInt = _fi()
    wifi_tx_latency_mov_min: FlexInt = _fi()
    wifi_tx_latency_mov_total: FlexInt = _fi()
    wifi_tx_latency_mov_count: FlexInt = _fi()


@dataclass
class Radio:
    name: str = ""
    radio: str = ""
    channel: FlexInt = _fi()
    ht: FlexInt = _fi()
    current_antenna_gain: FlexInt = _fi()
    max_txpower: FlexInt = _fi()
    min_txpower: FlexInt = _fi()
    nss: FlexInt = _fi()
    radio_caps: FlexInt = _fi()


@dataclass
class RadioStats:
    name: str = ""
    radio: str = ""
    ast_be_xmit: FlexInt = _fi()
    channel: FlexInt = _fi()
    cu_self_rx: FlexInt = _fi()
    cu_self_tx: FlexInt = _fi()
    cu_total: FlexInt = _fi()
    extchannel: FlexInt = _fi()
    gain: FlexInt = _fi()
    guest_num_sta: FlexInt = _fi()
    num_sta: FlexInt = _fi()
    tx_packets: FlexInt = _fi()
    tx_power: FlexInt = _fi()
    tx_retries: FlexInt = _fi()
    user_num_sta: FlexInt = _fi()


@dataclass
class OutletOverride:
    name: str = ""
    index: FlexInt = _fi()
    cycle_enabled: FlexBool = _fb()
    relay_state: FlexBool = _fb()


@dataclass
class Outlet:
    name: str = ""
    index: FlexInt = _fi()
    cycle_enabled: FlexBool = _fb()
    relay_state: FlexBool = _fb()
    outlet_caps: FlexInt = _fi()
    outlet_power_factor: FlexInt = _fi()
    outlet_current: FlexInt = _fi()
    outlet_power: FlexInt = _fi()
    outlet_voltage: FlexInt = _fi()


@dataclass
class Health:
    status: str = ""
    subsystem: str = ""
    wan_ip: str = ""
    gw_name: str = ""
    lan_ip: str = ""
    gw_system_stats: SystemStats = field(default_factory=SystemStats)
    num_user: FlexInt = _fi()
    num_guest: FlexInt = _fi()
    num_iot: FlexInt = _fi()
    tx_bytes_r: FlexInt = _fi()
    rx_bytes_r: FlexInt = _fi()
    num_ap: FlexInt = _fi()
    num_adopted: FlexInt = _fi()
    num_disabled: FlexInt = _fi()
    num_disconnected: FlexInt = _fi()
    num_pending: FlexInt = _fi()
    num_gw: FlexInt = _fi()
    num_sta: FlexInt = _fi()
    latency: FlexInt = _fi()
    uptime: FlexInt = _fi()
    drops: FlexInt = _fi()
    xput_up: FlexInt = _fi()
    xput_down: FlexInt = _fi()
    speedtest_ping: FlexInt = _fi()
    speedtest_lastrun: FlexInt = _fi()
    num_sw: FlexInt = _fi()
    remote_user_num_active: FlexInt = _fi()
    remote_user_num_inactive: FlexInt = _fi()
    remote_user_rx_bytes: FlexInt = _fi()
    remote_user_tx_bytes: FlexInt = _fi()
    remote_user_rx_packets: FlexInt = _fi()
    remote_user_tx_packets: FlexInt = _fi()


@dataclass
class DPIData:
    cat: FlexInt = _fi()
    app: FlexInt = _fi()
    tx_packets: FlexInt = _fi()
    rx_packets: FlexInt = _fi()
    tx_bytes: FlexInt = _fi()
    rx_bytes: FlexInt = _fi()


@dataclass
class DPITable:
    name: str = ""
    mac: str = ""
    site_name: str = ""
    source_name: str = ""
    by_app: list[DPIData] = field(default_factory=list)


@dataclass
class Site:
    name: str = ""
    site_name: str = ""
    source_name: str = ""
    desc: str = ""
    health: list[Health] = field(default_factory=list)
    num_new_alarms: FlexInt = _fi()


@dataclass
class Client:
    mac: str = ""
    site_name: str = ""
    source_name: str = ""
    ap_name: str = ""
    gw_name: str = ""
    sw_name: str = ""
    oui: str = ""
    radio_name: str = ""
    radio: str = ""
    radio_proto: str = ""
    radio_description: str = ""
    name: str = ""
    note: str = ""
    fixed_ip: str = ""
    essid: str = ""
    bssid: str = ""
    ip: str = ""
    sw_port: FlexInt = _fi()
    os_class: FlexInt = _fi()
    os_name: FlexInt = _fi()
    dev_cat: FlexInt = _fi()
    dev_id: FlexInt = _fi()
    dev_vendor: FlexInt = _fi()
    dev_family: FlexInt = _fi()
    is_wired: FlexBool = _fb()
    is_guest: FlexBool = _fb()
    use_fixed_ip: FlexBool = _fb()
    powersave_enabled: FlexBool = _fb()
    channel: FlexInt = _fi()
    vlan: FlexInt = _fi()
    anomalies: FlexInt = _fi()
    satisfaction: FlexInt = _fi()
    bytes_r: FlexInt = _fi()
    ccq: FlexInt = _fi()
    noise: FlexInt = _fi()
    roam_count: FlexInt = _fi()
    rssi: FlexInt = _fi()
    rx_bytes: FlexInt = _fi()
    rx_bytes_r: FlexInt = _fi()
    rx_packets: FlexInt = _fi()
    rx_rate: FlexInt = _fi()
    signal: FlexInt = _fi()
    tx_bytes: FlexInt = _fi()
    tx_bytes_r: FlexInt = _fi()
    tx_packets: FlexInt = _fi()
    tx_retries: FlexInt = _fi()
    tx_power: FlexInt = _fi()
    tx_rate: FlexInt = _fi()
    uptime: FlexInt = _fi()
    wifi_tx_attempts: FlexInt = _fi()
    wired_rx_bytes: FlexInt = _fi()
    wired_rx_bytes_r: FlexInt = _fi()
    wired_rx_packets: FlexInt = _fi()
    wired_tx_bytes: FlexInt = _fi()
    wired_tx_bytes_r: FlexInt = _fi()
    wired_tx_packets: FlexInt = _fi()


@dataclass
class RogueAP:
    security: str = ""
    oui: str = ""
    band: str = ""
    bssid: str = ""
    ap_mac: str = ""
    radio: str = ""
    radio_name: str = ""
    site_name: str = ""
    essid: str = ""
    source_name: str = ""
    channel: int = 0
    age: FlexInt = _fi()
    bw: FlexInt = _fi()
    center_freq: FlexInt = _fi()
    freq: FlexInt = _fi()
    noise: FlexInt = _fi()
    rssi: FlexInt = _fi()
    rssi_age: FlexInt = _fi()
    signal: FlexInt = _fi()


@dataclass
class _Device:
    mac: str = ""
    site_name: str = ""
    source_name: str = ""
    name: str = ""
    version: str = ""
    model: str = ""
    serial: str = ""
    type: str = ""
    ip: str = ""
    adopted: FlexBool = _fb()
    locating: FlexBool = _fb()
    upgradeable: FlexBool = _fb()
    bytes: FlexInt = _fi()
    last_seen: FlexInt = _fi()
    rx_bytes: FlexInt = _fi()
    tx_bytes: FlexInt = _fi()
    uptime: FlexInt = _fi()
    state: FlexInt = _fi()
    user_num_sta: FlexInt = _fi()
    guest_num_sta: FlexInt = _fi()
    num_sta: FlexInt = _fi()
    sys_stats: SysStats = field(default_factory=SysStats)
    system_stats: SystemStats = field(default_factory=SystemStats)
    stat: DeviceStat | None = field(default_factory=DeviceStat)
    port_table: list[Port] = field(default_factory=list)


@dataclass
class UAP(_Device):
    vap_table: list[VAP] = field(default_factory=list)
    radio_table: list[Radio] = field(default_factory=list)
    radio_table_stats: list[RadioStats] = field(default_factory=list)


@dataclass
class USW(_Device):
    fan_level: FlexInt = _fi()
    general_temperature: FlexInt = _fi()


@dataclass
class PDU(_Device):
    outlet_ac_power_budget: FlexInt = _fi()
    outlet_ac_power_consumption: FlexInt = _fi()
    outlet_enabled: FlexBool = _fb()
    overheating: FlexBool = _fb()
    power_source: FlexInt = _fi()
    total_max_power: FlexInt = _fi()
    outlet_overrides: list[OutletOverride] = field(default_factory=list)
    outlet_table: list[Outlet] = field(default_factory=list)


@dataclass
class _Gateway(_Device):
    license_state: str = ""
    network_table: list[Network] = field(default_factory=list)
    wan1: Wan = field(default_factory=Wan)
    wan2: Wan = field(default_factory=Wan)
    uplink: Uplink = field(default_factory=Uplink)
    speedtest_status: SpeedtestStatus = field(default_factory=SpeedtestStatus)
    temperatures: list[Temperature] = field(default_factory=list)
    storage: list[Storage] = field(default_factory=list)
    num_desktop: FlexInt = _fi()
    num_handheld: FlexInt = _fi()
    num_mobile: FlexInt = _fi()


@dataclass
class USG(_Gateway):
    pass


@dataclass
class UXG(_Gateway):
    pass


@dataclass
class UDM(_Gateway):
    vap_table: list[VAP] = field(default_factory=list)
    radio_table: list[Radio] = field(default_factory=list)
    radio_table_stats: list[RadioStats] = field(default_factory=list)


@dataclass
class _Notice:
    datetime: datetime | None = None
    site_name: str = ""
    source_name: str = ""
    msg: str = ""
    host: str = ""
    dest_port: int = 0
    src_port: int = 0
    dest_ip: str = ""
    dst_mac: str = ""
    src_ip: str = ""
    src_mac: str = ""
    dest_ip_geo: IPGeo = field(default_factory=IPGeo)
    source_ip_geo: IPGeo = field(default_factory=IPGeo)
    in_iface: str = ""
    event_type: str = ""
    subsystem: str = ""
    usg_ip: str = ""
    proto: str = ""
    key: str = ""
    catname: str = ""
    app_proto: str = ""
    inner_alert_action: str = ""


@dataclass
class Event(_Notice):
    guest: str = ""
    user: str = ""
    hostname: str = ""
    ip: str = ""
    admin: str = ""
    ap_from: str = ""
    ap_to: str = ""
    ap: str = ""
    ap_name: str = ""
    gw: str = ""
    gw_name: str = ""
    sw: str = ""
    sw_name: str = ""
    radio: str = ""
    radio_from: str = ""
    radio_to: str = ""
    ssid: str = ""
    network: str = ""
    is_admin: FlexBool = _fb()
    channel: FlexInt = _fi()
    channel_from: FlexInt = _fi()
    channel_to: FlexInt = _fi()
    duration: FlexInt = _fi()
    bytes: FlexInt = _fi()


@dataclass
class IDS(_Notice):
    archived: FlexBool = _fb()


@dataclass
class Alarm(_Notice):
    archived: FlexBool = _fb()


@dataclass
class Anomaly:
    datetime: datetime | None = None
    site_name: str = ""
    source_name: str = ""
    device_mac: str = ""
    anomaly: str = ""