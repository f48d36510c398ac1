# forumbackend/group_titles/resolver.py
"""
群組稱號規則引擎 (pure, no DB access).

每條規則格式: ``groupName|tl1Title|tl2Title|tl3Title|tl4Title``
Trust level n 對應第 n 個欄位 (欄位 0 是群組名稱)。
"""

from dataclasses import dataclass, field
from typing import Optional

RULE_SEPARATOR = "|"
MIN_RULE_FIELDS = 2
TITLED_TRUST_LEVELS = (1, 2, 3, 4)


# --- Rule ---
@dataclass(frozen=True)
class TitleRule:
    group_name: str
    titles: tuple = field(default_factory=tuple)
    raw: str = ""

    @classmethod
    def parse(cls, line):
        parts = [part.strip() for part in str(line).split(RULE_SEPARATOR)]
        # trailing fields are optional
        while len(parts) > 1 and not parts[-1]:
            parts.pop()
        return cls(group_name=parts[0], titles=tuple(parts[1:]), raw=str(line))

    @property
    def field_count(self):
        return 1 + len(self.titles)

    @property
    def is_valid(self):
        return self.field_count >= MIN_RULE_FIELDS

    def matches(self, group_name):
        if group_name is None:
            return False
        return self.group_name.lower() == str(group_name).strip().lower()

    def title_for(self, trust_level):
        if trust_level not in TITLED_TRUST_LEVELS:
            return None
        if trust_level > len(self.titles):
            return None
        return self.titles[trust_level - 1]
# --- Rule 結束 ---


def parse_rule_set(value):
    """
    把設定值 (多行字串或字串列表) 轉成有序的 TitleRule 列表。
    空白行略過，重複的群組保留 (第一條符合的規則生效)。
    """
    if not value:
        return []
    lines = value.splitlines() if isinstance(value, str) else list(value)
    rules = []
    for line in lines:
        if isinstance(line, TitleRule):
            rules.append(line)
        elif line is not None and str(line).strip():
            rules.append(TitleRule.parse(line))
    return rules


def malformed_rules(value):
    """Raw lines that would be skipped because they carry no title field."""
    return [rule.raw.strip() for rule in parse_rule_set(value) if not rule.is_valid]


# --- Context / Decision ---
@dataclass(frozen=True)
class UserTitleContext:
    primary_group_name: Optional[str]
    trust_level: int
    current_title: Optional[str] = None


@dataclass(frozen=True)
class NoChange:
    def __bool__(self):
        return False


@dataclass(frozen=True)
class SetTitle:
    title: str


NO_CHANGE = NoChange()
# --- Context / Decision 結束 ---


def find_matching_rule(rules, group_name):
    for rule in rules:
        if rule.matches(group_name):
            return rule
    return None


def resolve_title(context, rules, enabled):
    """
    根據使用者的主要群組與信任等級決定新稱號。

    回傳 ``SetTitle(title)`` 表示呼叫端要寫入新稱號，否則回傳 ``NO_CHANGE``。
    設定錯誤或資料缺漏一律視為不變更，不會拋出例外。
    """
    if not enabled or context is None:
        return NO_CHANGE

    group_name = (context.primary_group_name or "").strip()
    if not group_name or not rules:
        return NO_CHANGE

    rules = parse_rule_set(rules)

    rule = find_matching_rule(rules, group_name)
    if rule is None or not rule.is_valid:
        return NO_CHANGE

    new_title = rule.title_for(context.trust_level)
    if not new_title or not new_title.strip():
        return NO_CHANGE

    if new_title == context.current_title:
        return NO_CHANGE

    return SetTitle(new_title)
