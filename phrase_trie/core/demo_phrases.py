# demo_phrases.py
# Seed data for demos and manual poking: phrases about getting a fishing
# trip together (Russian). Lots of shared leading words, so it exercises
# prefix chains and cyrillic case-folding nicely.

FISHING_PHRASES = (
    "собираю компанию на рыбалку",
    "собираю команду на рыбалку",
    "собираю друзей на рыбалку",
    "собираю группу рыбаков",
    "собираюсь на рыбалку",
    "соберем компанию рыбаков",
    "соберем команду на рыбалку",
    "создаю группу для рыбалки",
    "создаю команду рыбаков",
    "ищу компанию для рыбалки",
    "ищу команду на рыбалку",
    "ищу партнеров по рыбалке",
    "ищу попутчиков на рыбалку",
    "приглашаю на рыбалку",
    "приглашаю в команду рыбаков",
    "поехали на рыбалку",
    "поехали рыбачить",
    "пойдем на рыбалку",
    "пойдем рыбачить вместе",
    "компания для рыбалки",
    "команда рыбаков",
    "группа рыбаков",
    "рыболовная команда",
    "рыболовная группа",
    "рыбалка с друзьями",
    "рыбалка в компании",
    "рыбалка выходного дня",
    "организую рыбалку",
    "планирую рыбалку",
    "готовлю рыбалку",
)
