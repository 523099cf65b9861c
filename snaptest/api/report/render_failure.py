"""Render a snapshot failure as console text."""

from ...utils.render_template import render_template
from .SnapshotFailure import SnapshotFailure

HEADLINES = {
    "recorded": "Snapshot recorded",
    "mismatch": "Snapshot does not match reference",
    "timeout": "Snapshot production timed out",
    "unsupported": "Unsupported snapshot strategy",
    "io_error": "Snapshot artifact I/O failed",
    "error": "Snapshot assertion failed",
}

FAILURE_TEMPLATE = """\
{{ headline }} [{{ test_scope }}{% if identifier %} #{{ identifier }}{% endif %}]

{{ message }}
{% if reference_path or candidate_path %}

{% if reference_path %}
  reference: {{ reference_path }}
{% endif %}
{% if candidate_path %}
  candidate: {{ candidate_path }}
{% endif %}
{% endif %}
{% if diff_command %}

  diff: {{ diff_command }}
{% endif %}
{% if attachments %}

  attachments: {{ attachments | join(", ") }}
{% endif %}
"""


def render_failure(failure: SnapshotFailure) -> str:
    """Self-contained failure text, readable even when attachments cannot be shown."""
    text = render_template(
        FAILURE_TEMPLATE,
        {
            "headline": HEADLINES[failure.kind],
            "test_scope": failure.test_scope,
            "identifier": failure.identity.identifier if failure.identity else None,
            "message": failure.message,
            "reference_path": failure.reference_path,
            "candidate_path": failure.candidate_path,
            "diff_command": failure.diff_command,
            "attachments": [a.name for a in failure.attachments],
        },
    )
    return text.rstrip("\n")
