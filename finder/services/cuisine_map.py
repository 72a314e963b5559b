# backend/finder/services/cuisine_map.py

# Classifier label (lowercase) → cuisine as written in the restaurant data.
# One value per label: "crispy chicken" goes to American.
FOOD_TO_CUISINE = {
    "burger": "American",
    "pizza": "Italian",
    "sushi": "Japanese",
    "biryani": "Indian",
    "tacos": "Mexican",
    "pasta": "Italian",
    "cheesecake": "Dessert",
    "baked potato": "American",
    "crispy chicken": "American",
    "chai": "Indian",
}


def cuisine_for_label(label):
    if not label:
        return None
    return FOOD_TO_CUISINE.get(str(label).strip().lower())
