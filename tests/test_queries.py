from unittest.mock import patch

import pytest
import requests

from greenmo.queries.green_mobility import Car, GreenMo
from greenmo.queries.position_query import BoundingBox, Position, run_query
from greenmo.queries.spirii import Charger, Spirii
from greenmo.utils.errors import MalformedEntityError, NetworkingError

POS1 = Position(lat=1.123456, lon=2.123456)
POS2 = Position(lat=3.123456, lon=4.123456)
BBOX = BoundingBox(corner1=POS1, corner2=POS2)


class TestGreenMo:

    def test_chargeable_cars_are_fetched(self, make_response):
        car1 = {"carId": 1, "lat": 1.123456, "lon": 2.123456, "fuelLevel": 30}
        car2 = {"carId": 2, "lat": 3.123456, "lon": 4.123456, "fuelLevel": 50}

        with patch("greenmo.utils.upstream.requests.get") as mock_get:
            mock_get.return_value = make_response(json_data=[car1, car2])
            greenmo = GreenMo(40)
            cars = run_query(greenmo, greenmo.parameters(BBOX))

        assert cars == [POS1]
        args, kwargs = mock_get.call_args
        assert args[0] == GreenMo.URL
        assert kwargs["params"] == {
            "lon1": "2.123456",
            "lat1": "1.123456",
            "lon2": "4.123456",
            "lat2": "3.123456",
        }

    def test_threshold_is_inclusive(self):
        cars = [Car(car_id=1, lat=1.0, lon=2.0, fuel_level=40), Car(car_id=2, lat=3.0, lon=4.0, fuel_level=41)]

        assert GreenMo(40).filter(cars) == cars[:1]

    def test_fractional_fuel_levels_are_kept(self):
        car = Car.from_dict({"carId": 7, "lat": 1.0, "lon": 2.0, "fuelLevel": "39.5"})

        assert car.fuel_level == 39.5
        assert GreenMo(40).filter([car]) == [car]

    def test_unexpected_status(self, make_response):
        with patch("greenmo.utils.upstream.requests.get") as mock_get:
            mock_get.return_value = make_response(status_code=503)
            greenmo = GreenMo(40)
            with pytest.raises(NetworkingError) as exc:
                run_query(greenmo, greenmo.parameters(BBOX))

        assert str(exc.value) == "Invalid response code - GreenMo. Got 503, expected 200"
        assert exc.value.provider == "GreenMo"
        assert exc.value.status == 503

    def test_connection_error_is_a_networking_error(self):
        with patch("greenmo.utils.upstream.requests.get") as mock_get:
            mock_get.side_effect = requests.exceptions.ConnectionError("boom")
            with pytest.raises(NetworkingError) as exc:
                GreenMo().fetch({})

        assert "GreenMo" in str(exc.value)

    def test_body_that_is_not_a_list(self, make_response):
        with patch("greenmo.utils.upstream.requests.get") as mock_get:
            mock_get.return_value = make_response(json_data={"error": "nope"})
            with pytest.raises(NetworkingError):
                GreenMo().fetch({})

    def test_body_that_is_not_json(self, make_response):
        with patch("greenmo.utils.upstream.requests.get") as mock_get:
            mock_get.return_value = make_response(json_data=ValueError("no json"))
            with pytest.raises(NetworkingError):
                GreenMo().fetch({})

    def test_malformed_cars_are_skipped(self, make_response):
        data = [
            {"carId": 1, "lat": 1.5, "lon": 2.5, "fuelLevel": 10},
            {"carId": 2, "lat": "north", "lon": 2.5, "fuelLevel": 10},
            {"carId": 3, "lat": 1.5},
            "garbage",
        ]
        with patch("greenmo.utils.upstream.requests.get") as mock_get:
            mock_get.return_value = make_response(json_data=data)
            cars = GreenMo().fetch({})

        assert cars == [Car(car_id=1, lat=1.5, lon=2.5, fuel_level=10.0)]

    def test_car_from_dict_rejects_missing_fuel_level(self):
        with pytest.raises(MalformedEntityError):
            Car.from_dict({"carId": 1, "lat": 1.0, "lon": 2.0})


class TestSpirii:

    def test_available_chargers_are_fetched(self, make_response):
        charger1 = {"properties": {"availableConnectors": 2}, "geometry": {"coordinates": [2.123456, 1.123456]}}
        charger2 = {"properties": {"availableConnectors": 0}, "geometry": {"coordinates": [3.123456, 4.123456]}}

        with patch("greenmo.utils.upstream.requests.get") as mock_get:
            mock_get.return_value = make_response(json_data=[charger1, charger2])
            spirii = Spirii()
            chargers = run_query(spirii, spirii.parameters(BBOX))

        assert chargers == [POS1]
        args, kwargs = mock_get.call_args
        assert args[0] == Spirii.URL
        assert kwargs["headers"] == {"appversion": "3.6.1"}
        assert kwargs["params"] == {
            "includeOccupied": "false",
            "includeOutOfService": "false",
            "includeRoaming": "false",
            "neCoordinates": "1.123456,4.123456",
            "swCoordinates": "3.123456,2.123456",
            "zoom": "22",
        }

    def test_unexpected_status(self, make_response):
        with patch("greenmo.utils.upstream.requests.get") as mock_get:
            mock_get.return_value = make_response(status_code=401)
            with pytest.raises(NetworkingError) as exc:
                Spirii().fetch({})

        assert str(exc.value) == "Invalid response code - Spirii. Got 401, expected 200"

    def test_charger_from_dict(self):
        charger = Charger.from_dict(
            {"properties": {"id": "abc", "availableConnectors": "3"}, "geometry": {"coordinates": [12.5, 55.7]}}
        )

        assert charger == Charger(charger_id="abc", available_connectors=3, coordinates=(12.5, 55.7))

    @pytest.mark.parametrize("data", [
        {"properties": {"availableConnectors": 1}},
        {"properties": {"availableConnectors": 1}, "geometry": {"coordinates": [1.0]}},
        {"geometry": {"coordinates": [1.0, 2.0]}},
        None,
    ])
    def test_malformed_charger(self, data):
        with pytest.raises(MalformedEntityError):
            Charger.from_dict(data)
