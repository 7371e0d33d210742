"""
End-to-end tests through the HTTP surface with a real database file.
"""

from test_fixtures import store, client, add_meals
from domain.enums import MealCategory
from repositories import MenuRepository


def test_health_check(client):
    r = client.get("/health-check")
    assert r.status_code == 200
    assert r.json() == {"status": "ok", "service": "MenuCalendar", "store": "open"}


def test_request_id_header(client):
    r = client.get("/health-check")
    assert r.headers["X-Request-ID"]
    assert "X-Process-Time" in r.headers


def test_menu_scenario(client):
    """Create meals, save a menu, read it, swap a slot for the same meal."""
    for name, category in (("Pancakes", "breakfast"), ("Soup", "lunch"), ("Pasta", "dinner")):
        r = client.post("/addMeal", json={"name": name, "category": category})
        assert r.status_code == 200

    r = client.post(
        "/addMenu",
        json={"date": "2024-01-01", "breakfast": "Pancakes", "lunch": "Soup", "dinner": "Pasta"},
    )
    assert r.status_code == 200
    assert r.json() == {"success": "Menu for 2024-01-01 added/updated successfully"}

    expected = {"date": "2024-01-01", "breakfast": "Pancakes", "lunch": "Soup", "dinner": "Pasta"}
    r = client.get("/getMenu", params={"date": "2024-01-01"})
    assert r.status_code == 200
    assert r.json() == expected

    r = client.post(
        "/changeMeal", json={"date": "2024-01-01", "category": "lunch", "newMeal": "Soup"}
    )
    assert r.status_code == 200
    assert r.json() == {
        "success": 'Menu for 2024-01-01 updated: lunch changed to "Soup"',
        "newMeal": "Soup",
    }

    assert client.get("/getMenu", params={"date": "2024-01-01"}).json() == expected


def test_add_menu_is_idempotent(client, store):
    add_meals(store)
    body = {"date": "2024-03-10", "breakfast": "Oatmeal", "lunch": "Caesar Salad", "dinner": "Roast Chicken"}

    assert client.post("/addMenu", json=body).status_code == 200
    once = client.get("/getMenu", params={"date": "2024-03-10"}).json()

    assert client.post("/addMenu", json=body).status_code == 200
    twice = client.get("/getMenu", params={"date": "2024-03-10"}).json()

    assert once == twice == {
        "date": "2024-03-10",
        "breakfast": "Oatmeal",
        "lunch": "Caesar Salad",
        "dinner": "Roast Chicken",
    }


def test_add_menu_overwrites_existing(client, store):
    add_meals(store)
    client.post(
        "/addMenu",
        json={"date": "2024-01-01", "breakfast": "Pancakes", "lunch": "Soup", "dinner": "Pasta"},
    )
    client.post(
        "/addMenu",
        json={"date": "2024-01-01", "breakfast": "Oatmeal", "lunch": "Soup", "dinner": "Roast Chicken"},
    )

    r = client.get("/getMenu", params={"date": "2024-01-01"})
    assert r.json()["breakfast"] == "Oatmeal"
    assert r.json()["dinner"] == "Roast Chicken"


def test_add_menu_unknown_meal(client, store):
    add_meals(store)

    r = client.post(
        "/addMenu",
        json={"date": "2024-01-01", "breakfast": "Waffles", "lunch": "Soup", "dinner": "Pasta"},
    )
    assert r.status_code == 400
    assert r.json() == {"error": 'Meal "Waffles" not found in category "breakfast"'}

    assert client.get("/getMenu", params={"date": "2024-01-01"}).status_code == 404


def test_add_menu_meal_names_are_case_sensitive(client, store):
    add_meals(store)

    r = client.post(
        "/addMenu",
        json={"date": "2024-01-01", "breakfast": "Pancakes", "lunch": "soup", "dinner": "Pasta"},
    )
    assert r.status_code == 400
    assert r.json() == {"error": 'Meal "soup" not found in category "lunch"'}


def test_add_menu_missing_field(client):
    r = client.post("/addMenu", json={"date": "2024-01-01", "breakfast": "Pancakes", "lunch": "Soup"})
    assert r.status_code == 400
    assert r.json() == {"error": "Date, breakfast, lunch, and dinner are required"}


def test_get_menu_missing_date(client):
    r = client.get("/getMenu")
    assert r.status_code == 400
    assert r.json() == {"error": "Date parameter is required"}


def test_get_menu_not_found(client):
    r = client.get("/getMenu", params={"date": "2024-12-25"})
    assert r.status_code == 404
    assert r.json() == {"error": "Menu not available for this date"}


def test_get_meals(client, store):
    ids = add_meals(store)

    r = client.get("/getMeals", params={"category": "LUNCH"})
    assert r.status_code == 200
    assert r.json() == {
        "meals": [
            {"id": ids["Soup"], "name": "Soup"},
            {"id": ids["Caesar Salad"], "name": "Caesar Salad"},
        ]
    }


def test_get_meals_empty_category(client):
    r = client.get("/getMeals", params={"category": "dinner"})
    assert r.status_code == 200
    assert r.json() == {"meals": []}


def test_get_meals_missing_or_invalid_category(client):
    r = client.get("/getMeals")
    assert r.status_code == 400
    assert r.json() == {"error": "Category parameter is required"}

    r = client.get("/getMeals", params={"category": "brunch"})
    assert r.status_code == 400
    assert r.json() == {"error": "Invalid category. Must be breakfast, lunch, or dinner"}


def test_add_meal(client):
    r = client.post("/addMeal", json={"name": "Vegetable Curry", "category": "Dinner"})
    assert r.status_code == 200
    body = r.json()
    assert body["success"] == 'Meal "Vegetable Curry" added to category "Dinner" successfully'
    assert isinstance(body["mealId"], int)

    meals = client.get("/getMeals", params={"category": "dinner"}).json()["meals"]
    assert meals == [{"id": body["mealId"], "name": "Vegetable Curry"}]


def test_add_meal_duplicate_keeps_count(client):
    assert client.post("/addMeal", json={"name": "Soup", "category": "lunch"}).status_code == 200

    r = client.post("/addMeal", json={"name": "Soup", "category": "lunch"})
    assert r.status_code == 400
    assert r.json() == {"error": 'Meal "Soup" already exists in category "lunch"'}

    assert len(client.get("/getMeals", params={"category": "lunch"}).json()["meals"]) == 1


def test_add_meal_validation(client):
    r = client.post("/addMeal", json={"name": "Soup"})
    assert r.status_code == 400
    assert r.json() == {"error": "Name and category are required"}

    r = client.post("/addMeal", json={"name": "Soup", "category": "elevenses"})
    assert r.status_code == 400
    assert r.json() == {"error": "Invalid category. Must be breakfast, lunch, or dinner"}


def test_change_meal_keeps_other_slots(client, store):
    add_meals(store)
    client.post(
        "/addMenu",
        json={"date": "2024-01-01", "breakfast": "Pancakes", "lunch": "Soup", "dinner": "Pasta"},
    )

    r = client.post(
        "/changeMeal", json={"date": "2024-01-01", "category": "Breakfast", "newMeal": "Oatmeal"}
    )
    assert r.status_code == 200
    assert r.json()["newMeal"] == "Oatmeal"

    assert client.get("/getMenu", params={"date": "2024-01-01"}).json() == {
        "date": "2024-01-01",
        "breakfast": "Oatmeal",
        "lunch": "Soup",
        "dinner": "Pasta",
    }


def test_change_meal_random_with_one_candidate(client, store):
    add_meals(store, {MealCategory.BREAKFAST: ["Pancakes"],
                      MealCategory.LUNCH: ["Soup"],
                      MealCategory.DINNER: ["Pasta"]})
    client.post(
        "/addMenu",
        json={"date": "2024-01-01", "breakfast": "Pancakes", "lunch": "Soup", "dinner": "Pasta"},
    )

    r = client.post(
        "/changeMeal", json={"date": "2024-01-01", "category": "dinner", "newMeal": "Random"}
    )
    assert r.status_code == 200
    assert r.json() == {
        "success": 'Menu for 2024-01-01 updated: dinner changed to "Pasta"',
        "newMeal": "Pasta",
    }


def test_change_meal_random_picks_from_category(client, store):
    add_meals(store)
    client.post(
        "/addMenu",
        json={"date": "2024-01-01", "breakfast": "Pancakes", "lunch": "Soup", "dinner": "Pasta"},
    )

    r = client.post(
        "/changeMeal", json={"date": "2024-01-01", "category": "dinner", "newMeal": "random"}
    )
    assert r.status_code == 200
    picked = r.json()["newMeal"]
    assert picked in {"Pasta", "Roast Chicken"}
    assert client.get("/getMenu", params={"date": "2024-01-01"}).json()["dinner"] == picked


def test_change_meal_random_empty_category(client, store):
    add_meals(store, {MealCategory.BREAKFAST: ["Pancakes"], MealCategory.DINNER: ["Pasta"]})
    with store.session() as db:
        MenuRepository(db).upsert_menu("2024-01-01", None, None, None)

    r = client.post(
        "/changeMeal", json={"date": "2024-01-01", "category": "lunch", "newMeal": "random"}
    )
    assert r.status_code == 400
    assert r.json() == {"error": 'No meals found in category "lunch"'}


def test_change_meal_menu_not_found(client, store):
    add_meals(store)
    before = client.get("/getMeals", params={"category": "lunch"}).json()

    r = client.post(
        "/changeMeal", json={"date": "2031-07-04", "category": "lunch", "newMeal": "Soup"}
    )
    assert r.status_code == 400
    assert r.json() == {"error": 'Menu for date "2031-07-04" not found'}

    assert client.get("/getMeals", params={"category": "lunch"}).json() == before
    assert client.get("/getMenu", params={"date": "2031-07-04"}).status_code == 404


def test_change_meal_unknown_meal(client, store):
    add_meals(store)
    client.post(
        "/addMenu",
        json={"date": "2024-01-01", "breakfast": "Pancakes", "lunch": "Soup", "dinner": "Pasta"},
    )

    r = client.post(
        "/changeMeal", json={"date": "2024-01-01", "category": "LUNCH", "newMeal": "Pasta"}
    )
    assert r.status_code == 400
    assert r.json() == {"error": 'Meal "Pasta" not found in category "LUNCH"'}


def test_change_meal_validation(client):
    r = client.post("/changeMeal", json={"date": "2024-01-01", "category": "lunch"})
    assert r.status_code == 400
    assert r.json() == {"error": "Date, category, and newMeal are required"}

    r = client.post(
        "/changeMeal", json={"date": "2024-01-01", "category": "tea", "newMeal": "Soup"}
    )
    assert r.status_code == 400
    assert r.json() == {"error": "Invalid category. Must be breakfast, lunch, or dinner"}
