"""
Keyword-matched vineyard assistant.

Rules are evaluated in order against the lowercased message; the first rule
with any matching substring wins. Messages matching nothing get the general
reply. There is no language model behind this.
"""
import asyncio
import logging
from dataclasses import dataclass
from datetime import datetime, timezone

from vinemanager.db.store import VineyardStore
from vinemanager.models.message import AssistantCategory, Message, MessageRole

logger = logging.getLogger(__name__)

GREETING = (
    "Hello! I'm your vineyard AI assistant. I can help you with grape cultivation, disease "
    "identification, irrigation planning, pest management, and general viticulture questions. "
    "How can I assist you today?"
)

QUICK_QUESTIONS = [
    "How do I identify powdery mildew?",
    "When should I water my vines?",
    "What are signs of nutrient deficiency?",
    "How do I prune young vines?",
    "Best practices for pest prevention?",
]


@dataclass(frozen=True)
class ResponseRule:
    keywords: tuple[str, ...]
    category: AssistantCategory
    content: str

    def matches(self, message: str) -> bool:
        return any(k in message for k in self.keywords)


# ── Rule table (order matters) ────────────────────────────────────────────────

_RULES: list[ResponseRule] = [
    ResponseRule(
        ("disease", "mildew", "rot", "fungus"),
        AssistantCategory.disease,
        "For grape diseases, here are key preventive measures:\n\n"
        "• **Powdery Mildew**: Apply sulfur-based fungicides during humid conditions. Ensure good air circulation.\n"
        "• **Downy Mildew**: Use copper-based treatments and avoid overhead watering.\n"
        "• **Black Rot**: Remove infected berries immediately and improve canopy management.\n"
        "• **Botrytis**: Reduce humidity around clusters and maintain proper spacing.\n\n"
        "Would you like specific treatment recommendations for any particular disease symptoms you're observing?",
    ),
    ResponseRule(
        ("water", "irrigation", "drought"),
        AssistantCategory.irrigation,
        "For optimal grape irrigation:\n\n"
        "• **Timing**: Water early morning to reduce evaporation and disease risk\n"
        "• **Frequency**: Deep, infrequent watering promotes strong root development\n"
        "• **Amount**: 1-2 inches per week during growing season\n"
        "• **Soil Test**: Check moisture at 12-18 inches depth\n"
        "• **Critical Periods**: Increase during fruit set and veraison\n\n"
        "**Drought Stress Signs**: Wilting leaves, reduced berry size, early leaf drop. "
        "Consider deficit irrigation techniques for wine grapes to concentrate flavors.",
    ),
    ResponseRule(
        ("pest", "insect", "aphid", "mite"),
        AssistantCategory.pest,
        "Common grape pests and management:\n\n"
        "• **Grape Phylloxera**: Use resistant rootstocks, monitor for galls on roots\n"
        "• **Spider Mites**: Increase humidity, use predatory mites, avoid broad-spectrum pesticides\n"
        "• **Aphids**: Encourage beneficial insects, use horticultural oils\n"
        "• **Thrips**: Yellow sticky traps, maintain weed-free vineyard edges\n"
        "• **Japanese Beetles**: Hand-picking, pheromone traps away from vines\n\n"
        "**IPM Approach**: Monitor weekly, use beneficial insects, targeted treatments only when "
        "thresholds are exceeded.",
    ),
    ResponseRule(
        ("prun", "trim", "cut"),
        AssistantCategory.pruning,
        "Grape pruning guidelines:\n\n"
        "**Winter Pruning (Dormant Season)**:\n"
        "• Remove 90% of previous year's growth\n"
        "• Keep strongest canes with good bud spacing\n"
        "• Maintain 2-4 main canes per vine\n"
        "• Cut just above outward-facing buds\n\n"
        "**Summer Pruning**:\n"
        "• Remove suckers and water sprouts\n"
        "• Thin shoots to improve air circulation\n"
        "• Remove leaves around fruit clusters (after fruit set)\n\n"
        "**Tools**: Use sharp, clean pruning shears. Disinfect between vines to prevent disease spread.",
    ),
    ResponseRule(
        ("fertiliz", "nutrition", "soil", "nutrient"),
        AssistantCategory.nutrition,
        "Grape nutrition essentials:\n\n"
        "**Soil Testing**: Annual tests for pH (6.0-7.0 ideal), nutrients, organic matter\n\n"
        "**Key Nutrients**:\n"
        "• **Nitrogen**: Moderate levels, avoid excess (promotes vegetative growth over fruit)\n"
        "• **Phosphorus**: Important for root development and flowering\n"
        "• **Potassium**: Critical for fruit quality and cold hardiness\n"
        "• **Magnesium**: Essential for photosynthesis\n\n"
        "**Timing**: Apply fertilizers in early spring before bud break. Avoid late-season nitrogen "
        "to promote dormancy.\n\n"
        "**Organic Options**: Compost, aged manure, cover crops (legumes for nitrogen)",
    ),
]

_FALLBACK = ResponseRule(
    (),
    AssistantCategory.general,
    "I can help with various aspects of grape growing:\n\n"
    "• **Disease Management**: Prevention and treatment of common grape diseases\n"
    "• **Irrigation Planning**: Water management strategies for optimal fruit quality\n"
    "• **Pest Control**: Integrated pest management approaches\n"
    "• **Pruning Techniques**: Seasonal pruning for vine health and productivity\n"
    "• **Soil & Nutrition**: Fertilization and soil health management\n"
    "• **Harvest Timing**: Determining optimal harvest dates\n\n"
    "What specific aspect would you like to explore? Feel free to describe any symptoms or "
    "challenges you're experiencing in your vineyard.",
)


def generate_response(message: str) -> tuple[str, AssistantCategory]:
    normalized = message.lower()
    for rule in _RULES:
        if rule.matches(normalized):
            return rule.content, rule.category
    return _FALLBACK.content, _FALLBACK.category


# ── Chat session ──────────────────────────────────────────────────────────────


def greeting_message(store: VineyardStore, timestamp: datetime) -> Message:
    return Message(
        id=store.next_id("messages"),
        role=MessageRole.assistant,
        content=GREETING,
        timestamp=timestamp,
        category=AssistantCategory.general,
    )


async def _reply_after(store: VineyardStore, content: str, delay: float) -> Message:
    await asyncio.sleep(delay)
    text, category = generate_response(content)
    reply = Message(
        id=store.next_id("messages"),
        role=MessageRole.assistant,
        content=text,
        timestamp=datetime.now(timezone.utc),
        category=category,
    )
    store.messages.append(reply)
    logger.debug("assistant: replied in category %s", category.value)
    return reply


async def send_message(store: VineyardStore, content: str, delay: float) -> tuple[Message, Message]:
    """
    Append the user's message, then the assistant's reply after `delay` seconds.

    The delayed reply is shielded: once a message is accepted its reply is
    always appended to the history, even if the caller goes away.
    """
    message = Message(
        id=store.next_id("messages"),
        role=MessageRole.user,
        content=content,
        timestamp=datetime.now(timezone.utc),
    )
    store.messages.append(message)
    reply = await asyncio.shield(_reply_after(store, content, delay))
    return message, reply
