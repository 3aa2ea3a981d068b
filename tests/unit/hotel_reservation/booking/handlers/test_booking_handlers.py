from hotel_reservation.booking.handlers import (
    create_booking,
    create_hotel,
    create_room,
    list_available_rooms,
    list_bookings,
    list_hotels,
    room_stats,
    transition_booking,
)


def _create_hotel_and_room(api_event, lambda_context, read_body):
    hotel = read_body(
        create_hotel.lambda_handler(
            api_event({"name": "Hotel Caribe", "city": "Cartagena", "rating": 4.5}),
            lambda_context,
        )
    )["data"]
    room = read_body(
        create_room.lambda_handler(
            api_event(
                {
                    "hotel_id": hotel["hotel_id"],
                    "number": "101",
                    "room_type": "double",
                    "price_per_night": "220000",
                }
            ),
            lambda_context,
        )
    )["data"]
    return hotel, room


def _booking_body(room_id: int, **overrides) -> dict:
    body = {
        "room_id": room_id,
        "guest": {"id": 7, "name": "Ana Gómez", "email": "ana@example.com"},
        "check_in_date": "2025-03-05",
        "check_out_date": "2025-03-10",
    }
    body.update(overrides)
    return body


class TestCreateHandlers:
    def test_create_hotel_and_room(self, api_event, lambda_context, read_body):
        hotel, room = _create_hotel_and_room(api_event, lambda_context, read_body)

        assert hotel == {
            "hotel_id": 1,
            "name": "Hotel Caribe",
            "city": "Cartagena",
            "rating": 4.5,
        }
        assert room == {
            "room_id": 2,
            "hotel_id": 1,
            "number": "101",
            "room_type": "double",
            "price_per_night": "220000",
            "currency": "COP",
            "available": True,
        }

    def test_create_hotel_with_invalid_payload_returns_400(
        self, api_event, lambda_context, read_body
    ):
        response = create_hotel.lambda_handler(
            api_event({"name": "", "city": "Cartagena", "rating": 9}), lambda_context
        )

        assert response["statusCode"] == 400
        body = read_body(response)
        assert body["status"] == "error"
        assert {tuple(e["loc"]) for e in body["errors"]} == {("name",), ("rating",)}

    def test_create_hotel_with_long_name(self, api_event, lambda_context, read_body):
        name = "Hotel " + "x" * 95

        response = create_hotel.lambda_handler(
            api_event({"name": name, "city": "Cartagena"}), lambda_context
        )

        assert response["statusCode"] == 201
        assert read_body(response)["data"]["name"] == name

    def test_malformed_json_returns_400(self, api_event, lambda_context, read_body):
        response = create_hotel.lambda_handler(api_event("{not json"), lambda_context)

        assert response["statusCode"] == 400
        assert read_body(response)["message"] == "Request body must be valid JSON"

    def test_create_room_for_unknown_hotel_returns_404(
        self, api_event, lambda_context, read_body
    ):
        response = create_room.lambda_handler(
            api_event(
                {
                    "hotel_id": 5,
                    "number": "101",
                    "room_type": "single",
                    "price_per_night": 100,
                }
            ),
            lambda_context,
        )

        assert response["statusCode"] == 404
        assert read_body(response)["message"] == "Hotel not found: 5"

    def test_create_confirmed_booking(self, api_event, lambda_context, read_body):
        hotel, room = _create_hotel_and_room(api_event, lambda_context, read_body)

        response = create_booking.lambda_handler(
            api_event(_booking_body(room["room_id"], status="confirmed", guest_count=2)),
            lambda_context,
        )

        assert response["statusCode"] == 201
        booking = read_body(response)["data"]
        assert booking["booking_id"] == 3
        assert booking["status"] == "confirmed"
        assert booking["nights"] == 5
        assert booking["guest_count"] == 2
        assert booking["guest"] == {
            "guest_id": 7,
            "name": "Ana Gómez",
            "email": "ana@example.com",
        }

        rooms = read_body(
            list_available_rooms.lambda_handler(
                api_event(query={"hotel_id": str(hotel["hotel_id"])}), lambda_context
            )
        )
        assert rooms["count"] == 0

    def test_create_booking_with_reversed_dates_returns_400(
        self, api_event, lambda_context, read_body
    ):
        _, room = _create_hotel_and_room(api_event, lambda_context, read_body)

        response = create_booking.lambda_handler(
            api_event(
                _booking_body(
                    room["room_id"],
                    check_in_date="2025-03-10",
                    check_out_date="2025-03-05",
                )
            ),
            lambda_context,
        )

        assert response["statusCode"] == 400
        assert "Check-out date must be after check-in date" in read_body(response)["message"]

    def test_create_booking_for_unknown_room_returns_404(
        self, api_event, lambda_context
    ):
        response = create_booking.lambda_handler(
            api_event(_booking_body(99)), lambda_context
        )

        assert response["statusCode"] == 404


class TestQueryHandlers:
    def test_list_hotels(self, api_event, lambda_context, read_body):
        _create_hotel_and_room(api_event, lambda_context, read_body)

        body = read_body(list_hotels.lambda_handler(api_event(), lambda_context))

        assert body["status"] == "success"
        assert body["count"] == 1
        assert body["data"][0]["name"] == "Hotel Caribe"

    def test_list_bookings_by_status(self, api_event, lambda_context, read_body):
        _, room = _create_hotel_and_room(api_event, lambda_context, read_body)
        for status in ("pending", "cancelled", "cancelled"):
            create_booking.lambda_handler(
                api_event(_booking_body(room["room_id"], status=status)),
                lambda_context,
            )

        body = read_body(
            list_bookings.lambda_handler(
                api_event(query={"status": "cancelled"}), lambda_context
            )
        )

        assert body["count"] == 2
        assert [b["booking_id"] for b in body["data"]] == [4, 5]

    def test_list_bookings_without_status_returns_400(self, api_event, lambda_context):
        response = list_bookings.lambda_handler(api_event(), lambda_context)
        assert response["statusCode"] == 400

    def test_room_stats(self, api_event, lambda_context, read_body):
        _create_hotel_and_room(api_event, lambda_context, read_body)

        body = read_body(room_stats.lambda_handler(api_event(), lambda_context))

        assert body["data"] == {
            "total": 1,
            "available": 1,
            "occupied": 0,
            "availability_percentage": 100,
        }


class TestTransitionHandler:
    def test_transition_booking(self, api_event, lambda_context, read_body):
        _, room = _create_hotel_and_room(api_event, lambda_context, read_body)
        booking = read_body(
            create_booking.lambda_handler(
                api_event(_booking_body(room["room_id"])), lambda_context
            )
        )["data"]

        response = transition_booking.lambda_handler(
            api_event(
                {"status": "confirmed"},
                path_parameters={"booking_id": str(booking["booking_id"])},
            ),
            lambda_context,
        )

        assert response["statusCode"] == 200
        assert read_body(response)["data"]["status"] == "confirmed"

    def test_illegal_transition_returns_409(self, api_event, lambda_context, read_body):
        _, room = _create_hotel_and_room(api_event, lambda_context, read_body)
        booking = read_body(
            create_booking.lambda_handler(
                api_event(_booking_body(room["room_id"], status="cancelled")),
                lambda_context,
            )
        )["data"]

        response = transition_booking.lambda_handler(
            api_event(
                {"status": "confirmed"},
                path_parameters={"booking_id": str(booking["booking_id"])},
            ),
            lambda_context,
        )

        assert response["statusCode"] == 409

    def test_unknown_booking_returns_404(self, api_event, lambda_context):
        response = transition_booking.lambda_handler(
            api_event({"status": "confirmed"}, path_parameters={"booking_id": "42"}),
            lambda_context,
        )
        assert response["statusCode"] == 404
