"""Built-in sign vocabulary.

Each entry maps a normalized key to ``{"kind", "color", "glyph"}``. Order
matters for the words table: partial matching scans it front to back.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

from .provider import TableProvider


def _d(kind: str, color: str, glyph: Optional[str] = None) -> Dict[str, Any]:
    return {"kind": kind, "color": color, "glyph": glyph}


BUILTIN_PHRASES: Dict[str, Dict[str, Any]] = {
    # Greetings
    "good morning": _d("good-morning", "#4CAF50", "🌅"),
    "good afternoon": _d("good-afternoon", "#4CAF50", "☀️"),
    "good evening": _d("good-evening", "#4CAF50", "🌆"),
    "good night": _d("good-night", "#2196F3", "🌙"),
    "good bye": _d("goodbye", "#4CAF50", "👋"),
    # Questions
    "how are you": _d("how-are-you", "#00BCD4", "❓"),
    "how do you do": _d("how-are-you", "#00BCD4", "❓"),
    "what is your name": _d("what-name", "#00BCD4", "❓"),
    "what's your name": _d("what-name", "#00BCD4", "❓"),
    "where are you from": _d("where-from", "#00BCD4", "📍"),
    "where is": _d("where-is", "#00BCD4", "📍"),
    "how much": _d("how-much", "#00BCD4", "❓"),
    "how many": _d("how-many", "#00BCD4", "❓"),
    "what time": _d("what-time", "#00BCD4", "⏰"),
    "what's up": _d("what-up", "#00BCD4", "❓"),
    # Politeness
    "thank you": _d("thank-you", "#FF9800", "🙏"),
    "thanks a lot": _d("thank-you-much", "#FF9800", "🙏"),
    "thank you very much": _d("thank-you-much", "#FF9800", "🙏"),
    "you're welcome": _d("welcome", "#4CAF50", "🙏"),
    "excuse me": _d("excuse-me", "#795548", "🙏"),
    "i'm sorry": _d("sorry", "#795548", "😔"),
    "i am sorry": _d("sorry", "#795548", "😔"),
    # Common phrases
    "nice to meet you": _d("nice-meet", "#4CAF50", "🤝"),
    "pleased to meet you": _d("nice-meet", "#4CAF50", "🤝"),
    "see you later": _d("see-later", "#4CAF50", "👋"),
    "see you soon": _d("see-soon", "#4CAF50", "👋"),
    "take care": _d("take-care", "#4CAF50", "🤗"),
    "have a good day": _d("good-day", "#4CAF50", "☀️"),
    "have a nice day": _d("good-day", "#4CAF50", "☀️"),
    # Actions
    "i need help": _d("need-help", "#E91E63", "🆘"),
    "can you help": _d("can-help", "#E91E63", "🆘"),
    "please help": _d("please-help", "#E91E63", "🆘"),
    "i don't understand": _d("dont-understand", "#00BCD4", "❓"),
    "i don't know": _d("dont-know", "#00BCD4", "❓"),
    "i understand": _d("understand", "#00BCD4", "💡"),
    # Time
    "right now": _d("now", "#FF9800", "⏰"),
    "later today": _d("later-today", "#00BCD4", "⏰"),
    "next week": _d("next-week", "#2196F3", "📅"),
    "last week": _d("last-week", "#795548", "📅"),
    # Feelings
    "i'm fine": _d("fine", "#4CAF50", "😊"),
    "i am fine": _d("fine", "#4CAF50", "😊"),
    "i'm good": _d("good", "#4CAF50", "👍"),
    "i am good": _d("good", "#4CAF50", "👍"),
    "i'm okay": _d("okay", "#2196F3", "👌"),
    "i am okay": _d("okay", "#2196F3", "👌"),
    # Requests
    "can i": _d("can-i", "#9C27B0", "🙏"),
    "may i": _d("may-i", "#9C27B0", "🙏"),
    "could you": _d("could-you", "#9C27B0", "🙏"),
    "would you": _d("would-you", "#9C27B0", "🙏"),
}


BUILTIN_WORDS: Dict[str, Dict[str, Any]] = {
    # Greetings
    "hello": _d("hello", "#4CAF50", "👋"),
    "hi": _d("hello", "#4CAF50", "👋"),
    "hey": _d("hello", "#4CAF50", "👋"),
    "goodbye": _d("goodbye", "#4CAF50", "👋"),
    "bye": _d("goodbye", "#4CAF50", "👋"),
    "morning": _d("good", "#4CAF50"),
    "afternoon": _d("good", "#4CAF50"),
    "evening": _d("good", "#4CAF50"),
    # Responses
    "yes": _d("yes", "#2196F3", "👍"),
    "no": _d("no", "#F44336", "👎"),
    "ok": _d("yes", "#2196F3", "👌"),
    "okay": _d("yes", "#2196F3", "👌"),
    "sure": _d("yes", "#2196F3", "👍"),
    "maybe": _d("maybe", "#FF9800"),
    # Politeness
    "thank": _d("thank", "#FF9800", "🙏"),
    "thanks": _d("thank", "#FF9800", "🙏"),
    "please": _d("please", "#9C27B0", "🙏"),
    "sorry": _d("sorry", "#795548", "😔"),
    "excuse": _d("sorry", "#795548"),
    "pardon": _d("sorry", "#795548"),
    "welcome": _d("welcome", "#4CAF50"),
    # Questions
    "what": _d("what", "#00BCD4", "❓"),
    "where": _d("where", "#00BCD4", "📍"),
    "how": _d("how", "#00BCD4", "❓"),
    "when": _d("when", "#00BCD4", "⏰"),
    "why": _d("why", "#00BCD4", "❓"),
    "who": _d("who", "#00BCD4", "👤"),
    "which": _d("what", "#00BCD4"),
    # Actions
    "help": _d("help", "#E91E63", "🆘"),
    "stop": _d("stop", "#F44336", "🛑"),
    "go": _d("go", "#4CAF50", "👉"),
    "come": _d("come", "#4CAF50", "👈"),
    "wait": _d("wait", "#FF9800"),
    "look": _d("look", "#2196F3", "👀"),
    "see": _d("look", "#2196F3", "👀"),
    "listen": _d("listen", "#9C27B0", "👂"),
    "hear": _d("listen", "#9C27B0", "👂"),
    "speak": _d("speak", "#00BCD4", "💬"),
    "talk": _d("speak", "#00BCD4", "💬"),
    "read": _d("read", "#607D8B"),
    "write": _d("write", "#607D8B"),
    # Emotions
    "love": _d("love", "#E91E63", "🤟"),
    "like": _d("like", "#E91E63", "❤️"),
    "happy": _d("happy", "#4CAF50", "😊"),
    "sad": _d("sad", "#2196F3", "😢"),
    "angry": _d("angry", "#F44336", "😠"),
    "scared": _d("scared", "#9C27B0", "😨"),
    "tired": _d("tired", "#795548", "😴"),
    # Descriptions
    "good": _d("good", "#4CAF50", "👍"),
    "bad": _d("bad", "#F44336", "👎"),
    "big": _d("big", "#FF9800", "⬆️"),
    "small": _d("small", "#00BCD4", "⬇️"),
    "hot": _d("hot", "#F44336", "🔥"),
    "cold": _d("cold", "#2196F3", "❄️"),
    "fast": _d("fast", "#E91E63", "⚡"),
    "slow": _d("slow", "#9C27B0"),
    # Time
    "now": _d("now", "#FF9800"),
    "later": _d("later", "#00BCD4"),
    "today": _d("today", "#4CAF50"),
    "tomorrow": _d("tomorrow", "#2196F3"),
    "yesterday": _d("yesterday", "#795548"),
    # People
    "me": _d("me", "#607D8B", "👈"),
    "you": _d("you", "#607D8B", "👉"),
    "he": _d("he", "#607D8B", "👤"),
    "she": _d("she", "#607D8B", "👤"),
    "we": _d("we", "#607D8B", "👥"),
    "they": _d("they", "#607D8B", "👥"),
    # Common words
    "water": _d("water", "#2196F3", "💧"),
    "food": _d("food", "#FF9800", "🍽️"),
    "eat": _d("eat", "#FF9800", "🍽️"),
    "drink": _d("drink", "#2196F3", "🥤"),
    "home": _d("home", "#9C27B0", "🏠"),
    "work": _d("work", "#607D8B", "💼"),
    "school": _d("school", "#00BCD4", "🏫"),
    "hospital": _d("hospital", "#E91E63", "🏥"),
    "doctor": _d("doctor", "#E91E63", "👨‍⚕️"),
    "friend": _d("friend", "#4CAF50", "👫"),
    "family": _d("family", "#E91E63", "👨‍👩‍👧‍👦"),
    "name": _d("name", "#607D8B"),
    "understand": _d("understand", "#00BCD4", "💡"),
    "know": _d("know", "#00BCD4", "💡"),
    "think": _d("think", "#9C27B0", "🤔"),
    "remember": _d("remember", "#9C27B0", "🧠"),
    "forget": _d("forget", "#795548"),
}


def load_builtin_tables() -> Tuple[Dict[str, Dict[str, Any]], Dict[str, Dict[str, Any]]]:
    return BUILTIN_WORDS, BUILTIN_PHRASES


def builtin_provider(**kwargs) -> TableProvider:
    return TableProvider(load_builtin_tables, name="builtin", **kwargs)
