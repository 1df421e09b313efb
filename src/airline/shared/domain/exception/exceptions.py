class DomainException(Exception):
    """ドメイン層・アプリケーション層で発生する基底例外"""

    pass


class ResourceNotFoundException(DomainException):
    """リソースが見つからない場合"""

    pass


class BusinessRuleViolationException(DomainException):
    """ビジネスルールに違反した場合（許可されていないステータス遷移など）"""

    pass


class OptimisticLockException(DomainException):
    """楽観ロックの競合エラー（ステータスが期待値と異なる場合）"""

    pass


class DownstreamFailureException(DomainException):
    """外部システム（決済ゲートウェイ等）の障害"""

    pass
