"""Sampling Gate.

A human-in-the-loop gate for model sampling requests issued by extensions
running inside an agent session.

High-level architecture
-----------------------

- ``sampling_gate.sampling``: the wire schemas, the reviewer workflow
  (intake and decision resolution), and translation between wire messages
  and the agent's conversation messages.
- ``sampling_gate.agent_core``: the capability interfaces the gate consumes
  (session to agent resolution, agent to provider lookup), the conversation
  message model, an in-memory agent registry and a Pydantic AI provider.
- ``sampling_gate.server``: the FastAPI service exposing the workflow over HTTP.

Typical workflow
----------------

1. An extension submits a ``SamplingRequest``; the gate answers ``pending``.
2. A reviewer sees the request and submits a ``SamplingApprovalRequest``.
3. ``approve`` and ``edit`` run the (possibly edited) request against the
   session agent's provider; ``deny`` returns a canned refusal.
"""

__version__ = "0.1.0"
