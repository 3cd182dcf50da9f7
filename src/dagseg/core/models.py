"""Data models for dagseg."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class SegmentationStrategy(str, Enum):
    """How a segmentable block is cut."""

    DAG_ONLY = "dag"
    DAG_PLUS_HMM = "dag+hmm"  # Unknown-word recovery not implemented

    @classmethod
    def from_flag(cls, use_hmm: bool) -> "SegmentationStrategy":
        return cls.DAG_PLUS_HMM if use_hmm else cls.DAG_ONLY


@dataclass(frozen=True)
class DictionaryEntry:
    """A word and its raw frequency as supplied to a dictionary build."""

    word: str
    freq: float

    def to_tuple(self) -> tuple[str, float]:
        return (self.word, self.freq)


@dataclass
class DictionaryStats:
    """Read-only summary of a segmenter's dictionary."""

    word_count: int
    total: float
    min_log_freq: float
    is_full_dictionary: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "word_count": self.word_count,
            "total": self.total,
            "min_log_freq": self.min_log_freq,
            "is_full_dictionary": self.is_full_dictionary,
        }


@dataclass(frozen=True)
class RouteStep:
    """Best cumulative log-probability from an offset, and the chosen end.

    ``end`` is None only for the base case at the end of the sentence.
    """

    score: float
    end: int | None


# Default minimal dictionary used until a full dictionary is loaded
DEFAULT_ENTRIES: list[tuple[str, float]] = [
    (word, 1)
    for word in (
        "我", "爱", "北京", "天安门",
        "的", "是", "在", "有", "和",
        "了", "不", "人", "都", "一",
        "个", "上", "也", "很", "到",
        "说", "要", "就", "去", "你",
        "他", "她", "它", "们", "这",
        "那", "什么", "怎么", "为什么",
        "中国", "中文", "学习", "工作",
        "生活", "时间", "地方", "朋友",
        "家人", "学校", "公司", "城市",
        "国家", "世界", "今天", "明天",
        "昨天", "现在", "以后", "以前",
        "天气", "很好", "公园", "散步",
        "人工智能", "技术", "正在", "快速",
        "发展", "改变", "我们", "方式",
        "学习", "中文", "有趣", "事情",
        "需要", "不断", "练习", "首都",
        "悠久", "历史", "丰富", "文化",
    )
]
