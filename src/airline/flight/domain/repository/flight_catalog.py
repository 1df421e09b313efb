from abc import abstractmethod
from datetime import date

from airline.flight.domain.entity import Flight
from airline.flight.domain.value_object import FlightId
from airline.shared.domain import Repository


class FlightCatalog(Repository[Flight, FlightId]):
    """フライトカタログ（読み取り専用）

    具象実装は Infrastructure 層で行う。
    """

    @abstractmethod
    def find_by_id(self, flight_id: FlightId) -> Flight | None:
        """フライトIDで検索"""
        raise NotImplementedError

    @abstractmethod
    def search(self, origin: str, destination: str, on: date) -> list[Flight]:
        """出発地・到着地・日付で検索

        該当なしの場合は空リストを返す。順序はカタログの登録順。
        """
        raise NotImplementedError
