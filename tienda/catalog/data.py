"""Built-in Christmas catalog used when CATALOG_PATH is not set."""

DEFAULT_PRODUCTS = [
    {"id": 1, "name": "Caja de galletas navideñas", "price": 12000,
     "desc": "Galletas artesanales con decoraciones festivas"},
    {"id": 2, "name": "Set de mug + cocoa", "price": 25000,
     "desc": "Mug temático y chocolate en polvo premium"},
    {"id": 3, "name": "Tarjeta personalizada", "price": 6000,
     "desc": "Tarjeta hecha a mano con mensaje"},
    {"id": 4, "name": "Adorno para árbol (pack 3)", "price": 18000,
     "desc": "Adornos de cerámica pintados a mano"},
    {"id": 5, "name": "Velas aromáticas", "price": 15000,
     "desc": "Aroma canela y naranja, ideal para ambiente navideño"},
    {"id": 6, "name": "Guirnalda LED", "price": 22000,
     "desc": "Luces cálidas para decorar tu hogar"},
    {"id": 7, "name": "Calcetín navideño grande", "price": 10000,
     "desc": "Para colgar en la chimenea o pared"},
    {"id": 8, "name": "Muñeco de nieve decorativo", "price": 30000,
     "desc": "Figura de mesa con detalles brillantes"},
]
