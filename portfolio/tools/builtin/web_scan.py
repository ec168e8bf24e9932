"""Web vulnerability scan — delegated to the remote vulnerability scanner."""
from ..capability import VULNERABILITY_SCANNER
from ..forms import FormField
from ..registry import Category, register_category

SCAN_TYPES = ("Security Headers & Configuration", "Full Security Audit")


def _error(data):
    return {
        "error": "Erreur de scan",
        "scanType": "Error",
        "riskLevel": "Unknown",
        "totalFound": 0,
        "checksPerformed": 0,
        "vulnerabilities": [],
    }


def render_web_scan(result):
    lines = [
        f"Risque: {result.get('riskLevel', 'Unknown')}",
        f"Vulnérabilités: {result.get('totalFound', 0)}",
        f"Tests effectués: {result.get('checksPerformed', 0)}",
    ]
    for vuln in result.get("vulnerabilities") or []:
        lines.append(f"- {vuln.get('type', '')} [{vuln.get('severity', '')}]: {vuln.get('description', '')}")
    return lines


@register_category(
    Category.WEB_SECURITY,
    fields=[
        FormField("target", type="url", label="URL cible", placeholder="https://example.com"),
        FormField("scanType", type="choice", label="Type de scan", choices=SCAN_TYPES, default=SCAN_TYPES[0]),
    ],
    render=render_web_scan,
    on_error=_error,
    delegated=True,
    icon="globe",
    color="bg-orange-500/10 text-orange-400 border-orange-500/20",
)
async def scan_vulnerabilities(config, data, ctx):
    """Look for common web application weaknesses."""
    body = {"target": data["target"], "scanType": data["scanType"]}
    return await ctx.capabilities.invoke(VULNERABILITY_SCANNER, body)
