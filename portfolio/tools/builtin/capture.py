"""Packet capture simulator — synthesizes a plausible traffic summary."""
from ..forms import FormField
from ..registry import Category, register_category

PROTOCOLS = ("HTTP", "HTTPS", "TCP", "UDP", "DNS", "ARP", "ICMP")
TOP_TALKERS = ("192.168.1.1", "192.168.1.100", "8.8.8.8")
SUSPICIOUS_ACTIVITY = ("Unusual DNS queries", "High bandwidth usage")
SUSPICIOUS_THRESHOLD = 0.8

INTERFACES = ("eth0", "wlan0", "lo")
DURATIONS = ("1 minute", "5 minutes", "10 minutes", "30 minutes")


def _draw(rng, low: int, span: int) -> int:
    """Integer in [low, low + span) from one rng.random() draw."""
    return int(rng.random() * span) + low


def _error(data):
    return {
        "error": "Erreur de capture",
        "interface": data.get("interface", INTERFACES[0]),
        "duration": data.get("duration", DURATIONS[1]),
        "totalPackets": 0,
        "protocols": [],
        "topTalkers": [],
        "suspiciousActivity": [],
    }


def render_capture(result):
    lines = [
        f"Interface: {result['interface']}",
        f"Durée: {result['duration']}",
        f"Paquets: {result['totalPackets']:,}",
        "Protocoles:",
    ]
    lines.extend(f"  {p['name']}: {p['count']}" for p in result["protocols"])
    lines.append("Top talkers:")
    lines.extend(f"  {ip}" for ip in result["topTalkers"])
    if result["suspiciousActivity"]:
        lines.append("⚠️ Activité suspecte:")
        lines.extend(f"  {a}" for a in result["suspiciousActivity"])
    return lines


@register_category(
    Category.NETWORK_ANALYSIS,
    fields=[
        FormField("interface", type="choice", label="Interface réseau", choices=INTERFACES, default=INTERFACES[0]),
        FormField("duration", type="choice", label="Durée de capture", choices=DURATIONS, default=DURATIONS[1]),
    ],
    render=render_capture,
    on_error=_error,
    icon="activity",
    color="bg-teal-500/10 text-teal-400 border-teal-500/20",
)
def simulate_capture(config, data, ctx):
    """Simulated packet capture summary."""
    rng = ctx.rng
    total = _draw(rng, 1000, 10000)
    protocols = [{"name": name, "count": _draw(rng, 50, 1000)} for name in PROTOCOLS]
    suspicious = list(SUSPICIOUS_ACTIVITY) if rng.random() > SUSPICIOUS_THRESHOLD else []
    return {
        "interface": data["interface"],
        "duration": data["duration"],
        "totalPackets": total,
        "protocols": protocols,
        "topTalkers": list(TOP_TALKERS),
        "suspiciousActivity": suspicious,
    }
