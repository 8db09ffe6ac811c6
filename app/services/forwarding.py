"""Inbox forwarding — describes the (not yet built) forward-to-analyze workflow.

Nothing polls the destination mailbox. The description tells the user what
would happen once a mail integration exists.
"""

FORWARDING_STEPS = (
    "Forward the complete vendor email thread to {address}.",
    "The inbox would be polled for new messages every few minutes.",
    "Each forwarded thread would be run through the same extraction as pasted text.",
    "The summary and spreadsheet would then appear under the sender's address.",
)

NOT_IMPLEMENTED_NOTE = (
    "Inbox polling is not implemented in this deployment; "
    "paste the thread into the analyzer instead."
)


def describe_forwarding_workflow(destination_address: str) -> str:
    """Fixed, human-readable description of the forwarding workflow."""
    address = (destination_address or "").strip() or "the analysis inbox"
    steps = " ".join(
        f"{i}. {step.format(address=address)}" for i, step in enumerate(FORWARDING_STEPS, 1)
    )
    return f"{steps} {NOT_IMPLEMENTED_NOTE}"
