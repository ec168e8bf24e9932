"""Penetration test simulator — randomized exploit run, nothing is executed."""
from ..forms import FormField
from ..registry import Category, register_category

EXPLOITS = (
    "ms17_010_eternalblue",
    "apache_struts2_content_type_ognl",
    "drupal_drupageddon2",
    "jenkins_script_console",
    "tomcat_mgr_upload",
)

PAYLOADS = (
    "windows/x64/meterpreter/reverse_tcp",
    "linux/x64/meterpreter/reverse_tcp",
    "java/meterpreter/reverse_tcp",
    "cmd/unix/reverse",
)

# A run succeeds when the draw exceeds this, i.e. 30% of the time
SUCCESS_THRESHOLD = 0.7
DEFAULT_TARGET = "192.168.1.100"


def pick(rng, items):
    """Uniform pick driven by a single rng.random() draw."""
    return items[int(rng.random() * len(items))]


def _error(data):
    return {
        "error": "Erreur de simulation",
        "target": data.get("target", DEFAULT_TARGET),
        "exploit": "",
        "payload": "",
        "status": "Failed",
        "sessions": 0,
    }


def render_pentest(result):
    return [
        f"Cible: {result['target']}",
        f"Exploit: {result['exploit']}",
        f"Payload: {result['payload']}",
        f"Statut: {result['status']}",
        f"Sessions: {result['sessions']}",
    ]


@register_category(
    Category.PENETRATION_TESTING,
    fields=[FormField("target", label="Cible", required=False, default=DEFAULT_TARGET, placeholder=DEFAULT_TARGET)],
    render=render_pentest,
    on_error=_error,
    icon="bug",
    color="bg-red-500/10 text-red-400 border-red-500/20",
)
def simulate_exploit(config, data, ctx):
    """Simulated exploitation framework run against a target."""
    rng = ctx.rng
    exploit = pick(rng, EXPLOITS)
    payload = pick(rng, PAYLOADS)
    status = "Success" if rng.random() > SUCCESS_THRESHOLD else "Failed"
    return {
        "target": data["target"],
        "exploit": exploit,
        "payload": payload,
        "status": status,
        "sessions": 1 if status == "Success" else 0,
    }
