"""
무한의 탑 커스텀 예외 클래스 정의

모든 예외는 TowerBotError를 상속받아 일관된 에러 처리를 제공합니다.
엔진 내부 서비스가 예외를 던지고, GameService가 연산 경계에서
success=False 결과로 변환합니다.
"""


class TowerBotError(Exception):
    """무한의 탑 기본 예외 클래스"""

    def __init__(self, message: str = "알 수 없는 오류가 발생했습니다"):
        self.message = message
        super().__init__(self.message)


# =============================================================================
# 아이템 관련 예외
# =============================================================================


class ItemNotFoundError(TowerBotError):
    """아이템을 찾을 수 없음"""

    def __init__(self, item_id: str):
        self.item_id = item_id
        super().__init__("아이템을 찾을 수 없습니다.")


class ItemNotEquippableError(TowerBotError):
    """장착 불가능한 아이템 (재료)"""

    def __init__(self, item_name: str):
        self.item_name = item_name
        super().__init__("재료 아이템은 착용할 수 없습니다.")


# =============================================================================
# 자원 관련 예외
# =============================================================================


class InsufficientGoldError(TowerBotError):
    """골드 부족"""

    def __init__(self, required: int, current: int):
        self.required = required
        self.current = current
        super().__init__("골드가 부족합니다.")


# =============================================================================
# 입력 관련 예외
# =============================================================================


class InvalidStatError(TowerBotError):
    """강화할 수 없는 스탯 이름"""

    def __init__(self, stat: str):
        self.stat = stat
        super().__init__(f"강화할 수 없는 스탯입니다: {stat}")
