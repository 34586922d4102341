# unifistats

`unifistats` turns the data a UniFi controller reports into DogStatsD-style
metrics. It covers sites, clients, access points, switches, PDUs, gateways,
DPI tables, events, IDS hits, alarms and anomalies. Everything goes through a
`Report`, which passes each value on to a statsd client object that you supply.

It has no dependencies outside the standard library.

## The data model

`unifistats.unifi` holds plain dataclasses for what a controller reports:

- `FlexInt` and `FlexBool` are values that may arrive as numbers or text.
  `FlexInt.add` and `FlexInt.as_int` work on the number. `FlexBool.as_float`
  gives 1.0 or 0.0.
- `FlexTemp.celsius()` converts a reading given in `C` or `F`.
- The device classes are `UAP`, `USW`, `PDU`, `USG`, `UXG` and `UDM`. Their parts
  include `Port`, `Wan`, `Network`, `VAP`, `Radio`, `RadioStats`, `Outlet` and
  `OutletOverride`.
- The other records are `Client`, `RogueAP`, `Site` with its `Health` list,
  `DPITable` with its `DPIData`, `Event`, `IDS`, `Alarm` and `Anomaly`.

## The report

`unifistats.report.Report` holds one collection run. It has these fields:

- `client` is any object with the methods `gauge(name, value, tags, rate)`,
  `count(...)`, `distribution(...)`, `timing(...)`, `event(StatsdEvent)` and
  `service_check(ServiceCheck)`.
- `collector` is any object with a `logf(msg, *args)` method. The event
  functions use it to write a log line for every event they send.
- `counts` holds the per-kind counters (`Item.USW`, `Item.ALARM`, …).
- `errors`, `start`, `end` and `elapsed` record how the run went.

`Report.report_event` uses the current time when the date is missing.
`Report.error(None)` is ignored.

## What gets reported

Every metric name has the form `unifi.<namespace>.<field>`. Examples are
`unifi.usw.bytes`, `unifi.uap_vaps.tx_bytes`, `unifi.usg.wan_ports.rx_bytes`
and `unifi.client_dpi.tx_packets`.

- `unifistats.devices` covers access points, switches and PDUs:
  `batch_uap`, `batch_usw`, `batch_pdu`, `batch_rogue_ap` and
  `batch_port_table`. Switches and PDUs that are not adopted, or are
  locating, are skipped. Rogue APs with an age of 0 are skipped. Ports that
  are down or disabled are skipped unless `dead_ports` is true.
- `unifistats.gateways` covers gateways: `batch_usg`, `batch_uxg` and
  `batch_udm`. A UDM also reports switch gauges. When it has access point
  stats, it reports access point, radio and VAP gauges as well. WAN ports
  that are down are skipped.
- `unifistats.clients` covers clients: `batch_client`, `batch_client_dpi`
  and `report_client_dpi_totals`. The DPI totals are only sent per category.
  `batch_client_dpi` raises `TypeError` for anything but a `DPITable`.
- `unifistats.sites` covers sites. `report_site` sends subsystem gauges.
  `report_site_dpi` sends `unifi.sitedpi.*` counts.
- `unifistats.events` sends events for `batch_event`, `batch_ids`,
  `batch_alarm` and `batch_anomaly`. Only entries newer than the given
  interval plus one second are sent (`is_recent`).

DPI categories and applications appear in tags as numbers. A category is
shown as `"<cat>"` and an application as `"<cat>:<app>"`; they are not
turned into names.

Empty tag values are dropped, except in the gauges of `batch_usg` and
`report_site`, which send their tags as they are.

## Example

```python
from unifistats.devices import batch_usw
from unifistats.report import Item, Report
from unifistats.unifi import USW, FlexBool, FlexInt


class PrintClient:
    def gauge(self, name, value, tags, rate):
        print(name, value, tags)


report = Report(client=PrintClient())
switch = USW(name="office", site_name="default", adopted=FlexBool(True), bytes=FlexInt(1024))
batch_usw(report, switch, dead_ports=False)
report.counts.val[Item.USW]   # 1
```

## Building blocks

The helpers in `unifistats.points` can be used on their own:

```python
from unifistats.points import clean_tags, metric_namespace, safe_stats_name, tag, tag_map_to_tags

name = metric_namespace("usw")
name("bytes")                                # "unifi.usw.bytes"
tag("site_name", "default")                  # "site_name:default"
clean_tags({"mac": "", "name": "office"})    # {"name": "office"}
tag_map_to_tags({"name": "office"})          # ["name:office"]
safe_stats_name("CPU Temp")                  # "cpu_temp"
```

`combine` and `combine_float64` merge maps, and later maps win.
`batch_sys_stats`, `batch_udm_temps` and `batch_udm_storage` build the
system, temperature and storage gauges that the device functions share.

## What it does not do

The package does not talk to a UniFi controller. It does not open a
connection to a Datadog agent. It has no polling loop, no configuration file
handling and no command to run. You supply the controller data, the statsd
client and the collector yourself, and you call the batching functions
for each item.