"""Dependency wiring for the TF-IDF search application."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Callable, Literal, Mapping

from domain.interfaces import TextExtractor, Tokenizer
from infrastructure.text_extraction.docx_extractor import DocxExtractor
from infrastructure.text_extraction.html_extractor import HtmlExtractor
from infrastructure.text_extraction.plain_text_extractor import PlainTextExtractor
from infrastructure.tokenization.regex_tokenizer import RegexTokenizer


TokenizerName = Literal["regex"]

DEFAULT_TOP_N = 10


@dataclass(slots=True)
class Container:
    """Simple container bundling concrete infrastructure implementations."""

    tokenizer: Tokenizer
    extractors: dict[str, TextExtractor]
    default_extractor: TextExtractor
    top_n: int = DEFAULT_TOP_N

    def extractor_for(self, suffix: str) -> TextExtractor:
        return self.extractors.get(suffix.lower(), self.default_extractor)


@dataclass(slots=True)
class ContainerConfig:
    """Configuration for the tokenizer and result size."""

    top_n: int = DEFAULT_TOP_N
    tokenizer: TokenizerName = "regex"
    extra_extractors: dict[str, TextExtractor] = field(default_factory=dict)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ContainerConfig:
        env = os.environ if environ is None else environ
        raw_top_n = env.get("TFIDFSEARCH_TOP_N")
        top_n = DEFAULT_TOP_N
        if raw_top_n:
            try:
                top_n = int(raw_top_n)
            except ValueError as exc:
                raise ValueError(f"TFIDFSEARCH_TOP_N must be an integer, got '{raw_top_n}'") from exc
            if top_n <= 0:
                raise ValueError(f"TFIDFSEARCH_TOP_N has to be greater than 0 but was {top_n}")
        return cls(top_n=top_n, tokenizer=env.get("TFIDFSEARCH_TOKENIZER", "regex"))


_TOKENIZER_FACTORIES: dict[TokenizerName, Callable[[], Tokenizer]] = {
    "regex": RegexTokenizer,
}


def _default_extractors() -> dict[str, TextExtractor]:
    html = HtmlExtractor()
    return {
        ".html": html,
        ".htm": html,
        ".docx": DocxExtractor(),
    }


def build_default_container(config: ContainerConfig | None = None) -> Container:
    """Instantiate the default infrastructure stack."""

    cfg = config or ContainerConfig()
    if cfg.top_n <= 0:
        raise ValueError(f"Top N has to be greater than 0 but was {cfg.top_n}")
    try:
        tokenizer = _TOKENIZER_FACTORIES[cfg.tokenizer]()
    except KeyError as exc:
        raise ValueError(f"Unknown tokenizer '{cfg.tokenizer}'") from exc
    extractors = _default_extractors()
    extractors.update({suffix.lower(): extractor for suffix, extractor in cfg.extra_extractors.items()})

    return Container(
        tokenizer=tokenizer,
        extractors=extractors,
        default_extractor=PlainTextExtractor(),
        top_n=cfg.top_n,
    )


__all__ = ["Container", "ContainerConfig", "DEFAULT_TOP_N", "build_default_container"]
