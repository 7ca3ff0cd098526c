"""
Intercom conversation schemas.

Matches the conversation object Intercom sends in webhook notifications.
Reference: https://developers.intercom.com/docs/references/rest-api/api.intercom.io/Conversations/conversation/
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import StrictBool

from intercom_sink.schemas.wire import (
    EpochSeconds,
    Int8,
    Int32,
    OptionalEpochSeconds,
    UInt8,
    UInt32,
    WireModel,
    wrapped_list,
)


class ConversationState(str, Enum):
    OPEN = "open"
    CLOSED = "closed"
    SNOOZED = "snoozed"


class ConversationPriority(str, Enum):
    PRIORITY = "priority"
    NOT_PRIORITY = "not_priority"


class SLAStatus(str, Enum):
    HIT = "hit"
    MISSED = "missed"
    CANCELLED = "cancelled"
    ACTIVE = "active"


class ContentType(str, Enum):
    """Kind of knowledge source cited by the AI agent."""

    FILE = "file"
    ARTICLE = "article"
    EXTERNAL_CONTENT = "external_content"
    CONTENT_SNIPPET = "content_snippet"
    WORKFLOW_CONNECTOR_ACTION = "workflow_connector_action"


class SourceType(str, Enum):
    """Where the AI agent was triggered from."""

    ESSENTIALS_PLAN_SETUP = "essentials_plan_setup"
    PROFILE = "profile"
    WORKFLOW = "workflow"
    WORKFLOW_PREVIEW = "workflow_preview"
    FIN_PREVIEW = "fin_preview"


class LastAnswerType(str, Enum):
    """Type of the last answer given by the AI agent."""

    AI_ANSWER = "ai_answer"
    CUSTOM_ANSWER = "custom_answer"


class ResolutionState(str, Enum):
    ASSUMED_RESOLUTION = "assumed_resolution"
    CONFIRMED_RESOLUTION = "confirmed_resolution"
    ROUTED_TO_TEAM = "routed_to_team"
    ABANDONED = "abandoned"


class Tag(WireModel):
    """Tag applied to a conversation."""

    type: str
    id: str
    name: str
    applied_at: EpochSeconds


class Reference(WireModel):
    """Pointer to another Intercom object (teammate, contact)."""

    type: str
    id: str


class ContactReference(Reference):
    """Contact on a conversation, with the external id if the contact has one."""

    external_id: Optional[str] = None

    @property
    def reference(self) -> Reference:
        return Reference(type=self.type, id=self.id)


class ConversationRating(WireModel):
    """Satisfaction rating left by the contact."""

    rating: Int8
    remark: str
    created_at: EpochSeconds
    contact: ContactReference
    teammate: Reference


class Author(WireModel):
    type: str
    id: str
    name: str
    email: str


class Attachment(WireModel):
    """File attached to the source message. width/height are set for images."""

    type: str
    name: str
    url: str
    content_type: str
    filesize: Int32
    width: Int32
    height: Int32


class ConversationSource(WireModel):
    """The message that started the conversation."""

    type: str
    id: str
    delivered_as: str
    subject: str
    body: str
    author: Author
    attachments: list[Attachment]
    url: Optional[str] = None
    redacted: StrictBool


class FirstContactReply(WireModel):
    created_at: EpochSeconds
    type: str
    url: Optional[str] = None


class AppliedSLA(WireModel):
    type: str
    sla_name: str
    sla_status: SLAStatus


class Statistics(WireModel):
    """Timing and count metrics. Durations are in seconds."""

    type: str
    time_to_assignment: UInt32
    time_to_admin_reply: UInt32
    time_to_first_close: UInt32
    time_to_last_close: UInt32
    median_time_to_reply: UInt32
    first_contact_reply_at: EpochSeconds
    first_assignment_at: EpochSeconds
    first_admin_reply_at: EpochSeconds
    first_close_at: EpochSeconds
    last_assignment_at: EpochSeconds
    last_assignment_admin_reply_at: EpochSeconds
    last_contact_reply_at: EpochSeconds
    last_admin_reply_at: EpochSeconds
    last_close_at: EpochSeconds
    last_closed_by_id: str
    count_reopens: Int32
    count_assignments: Int32
    count_conversation_parts: Int32


class ContentSources(WireModel):
    """Knowledge source the AI agent used in its answer."""

    content_type: ContentType
    url: str
    title: str
    locale: str


TagList = wrapped_list(Tag, "tags", "tag.list")
TeammateList = wrapped_list(Reference, "teammates", "admin.list")
ContactList = wrapped_list(ContactReference, "contacts", "contact.list")
ContentSourceList = wrapped_list(
    ContentSources, "content_sources", "content_source.list"
)


class AIAgent(WireModel):
    """Outcome of the AI agent's participation in the conversation."""

    source_type: SourceType
    source_title: Optional[str] = None
    last_answer_type: Optional[LastAnswerType] = None
    resolution_state: ResolutionState
    rating: UInt8
    rating_remark: str
    content_sources: ContentSourceList


class Conversation(WireModel):
    """
    Conversation aggregate root.

    ``tags``, ``contacts``, ``teammates`` (and ``ai_agent.content_sources``)
    tolerate schema drift: a malformed collection decodes to an empty list.
    Every other required field must be present and valid, and each optional
    sub-object is either absent or complete.
    """

    type: str
    id: str
    title: Optional[str] = None
    created_at: EpochSeconds
    updated_at: EpochSeconds
    waiting_since: OptionalEpochSeconds
    snoozed_until: OptionalEpochSeconds
    open: StrictBool
    state: ConversationState
    read: StrictBool
    priority: ConversationPriority
    admin_assignee_id: Optional[Int32] = None
    team_assignee_id: Optional[str] = None
    tags: TagList
    conversation_rating: Optional[ConversationRating] = None
    source: ConversationSource
    contacts: ContactList
    teammates: TeammateList
    custom_attributes: dict[str, str]
    first_contact_reply: Optional[FirstContactReply] = None
    sla_applied: Optional[AppliedSLA] = None
    statistics: Optional[Statistics] = None
    ai_agent_participated: StrictBool
    ai_agent: AIAgent
