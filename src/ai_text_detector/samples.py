"""Sample passages for trying the detector from the command line."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

SAMPLES: Mapping[str, str] = MappingProxyType(
    {
        "chatgpt": (
            "In a quiet village where no one had ever seen the stars, a curious child "
            "named Luma built a tower tall enough to touch the sky. Each night, she "
            "climbed it with a lantern in hand, hoping the stars would notice her light. "
            "One evening, a single star blinked back—and then began to fall. It landed "
            "gently in her palm, whispering secrets of distant galaxies only she could "
            "understand. From that night on, the stars visited the village in dreams, "
            "painting the skies with colors unknown. Luma never spoke of her tower again, "
            "but the stars always lingered just a little closer."
        ),
        "claude": (
            "In today's rapidly evolving technological landscape, it's worth noting that "
            "machine learning algorithms continue to revolutionize how we approach data "
            "analysis. These cutting-edge systems enable organizations to harness the "
            "power of big data, transforming raw information into valuable insights that "
            "can enhance operational efficiency and drive innovation across diverse sectors."
        ),
        "gemini": (
            "The advancement of artificial intelligence represents a paradigm shift in "
            "computational capabilities. Through sophisticated algorithms and neural "
            "networks, these systems demonstrate remarkable proficiency in pattern "
            "recognition, natural language processing, and predictive analytics. This "
            "technological evolution enables unprecedented automation and optimization "
            "across various domains."
        ),
        "gpt4": (
            "As we delve into the realm of artificial intelligence, it becomes evident "
            "that these sophisticated systems have fundamentally transformed numerous "
            "aspects of modern business operations. The comprehensive integration of AI "
            "technologies facilitates enhanced decision-making processes, streamlines "
            "operational workflows, and enables organizations to maintain competitive "
            "advantages in an increasingly dynamic marketplace."
        ),
        "human": (
            "Mr. and Mrs. Dursley, of number four, Privet Drive, were proud to say that "
            "they were perfectly normal, thank you very much. They were the last people "
            "you'd expect to be involved in anything strange or mysterious, because they "
            "just didn't hold with such nonsense."
        ),
        "humanCasual": (
            "Oh my goodness, I just discovered this amazing coffee shop downtown! The "
            "barista was SO nice, and they had this incredible lavender latte that I'm "
            "obsessed with. I've been there three times this week already (don't judge "
            "me 😅). The vibe is super chill, perfect for working or just hanging out "
            "with friends. Anyone wanna check it out with me this weekend??"
        ),
    }
)


def get_sample(name: str) -> str:
    """Return a bundled sample by name, raising KeyError with the valid names."""
    try:
        return SAMPLES[name]
    except KeyError:
        raise KeyError(f"Unknown sample '{name}'. Choose from: {', '.join(SAMPLES)}") from None
