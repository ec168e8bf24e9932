"""Port scan — delegated to the remote port scanner."""
from ..capability import PORT_SCANNER
from ..forms import FormField
from ..registry import Category, register_category

SCAN_TYPES = ("Common Ports Scan", "Full Port Scan")


def _error(data):
    return {
        "error": "Erreur de scan de ports",
        "target": data.get("target", ""),
        "openPorts": [],
        "statistics": {"totalScanned": 0, "openPorts": 0, "closedPorts": 0},
        "securityIssues": [],
    }


def render_port_scan(result):
    stats = result.get("statistics") or {}
    lines = [
        f"Ports scannés: {stats.get('totalScanned', 0)}",
        f"Ouverts: {stats.get('openPorts', 0)}",
        f"Fermés: {stats.get('closedPorts', 0)}",
    ]
    open_ports = result.get("openPorts") or []
    if open_ports:
        lines.append("Ports ouverts:")
        lines.extend(f"Port {p.get('port')} - {p.get('service', '')} ({p.get('category', '')})" for p in open_ports)
    issues = result.get("securityIssues") or []
    if issues:
        lines.append("⚠️ Problèmes de sécurité:")
        lines.extend(
            f"- {i.get('issue', '')} [{i.get('severity', '')}]: {i.get('description', '')}" for i in issues
        )
    return lines


@register_category(
    Category.NETWORK_SECURITY,
    fields=[
        FormField("target", label="Cible (domaine ou IP)", placeholder="example.com"),
        FormField("scanType", type="choice", label="Type de scan", choices=SCAN_TYPES, default=SCAN_TYPES[0]),
    ],
    render=render_port_scan,
    on_error=_error,
    delegated=True,
    icon="wifi",
    color="bg-indigo-500/10 text-indigo-400 border-indigo-500/20",
)
async def scan_ports(config, data, ctx):
    """Discover open ports and exposed services on a host."""
    body = {"target": data["target"], "scanType": data["scanType"]}
    return await ctx.capabilities.invoke(PORT_SCANNER, body)
