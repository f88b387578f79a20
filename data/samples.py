"""
Data Layer: Samples
Documents de démonstration pour la commande `demo`
"""

DEMO_SOURCE = """function calculateTotal(items) {
  let total = 0;
  for (let i = 0; i < items.length; i++) {
    total += items[i].price;
  }
  return total;
}

class ShoppingCart {
  constructor() {
    this.items = [];
  }

  addItem(item) {
    this.items.push(item);
  }

  removeItem(itemId) {
    this.items = this.items.filter(item => item.id !== itemId);
  }

  getTotal() {
    return calculateTotal(this.items);
  }
}"""

DEMO_TARGET = """function calculateTotal(items, taxRate = 0) {
  let subtotal = 0;
  for (const item of items) {
    subtotal += item.price * item.quantity;
  }
  const tax = subtotal * taxRate;
  return subtotal + tax;
}

class ShoppingCart {
  constructor() {
    this.items = [];
    this.discountCode = null;
  }

  addItem(item) {
    const existingItem = this.items.find(i => i.id === item.id);
    if (existingItem) {
      existingItem.quantity += item.quantity || 1;
    } else {
      this.items.push({...item, quantity: item.quantity || 1});
    }
  }

  removeItem(itemId) {
    this.items = this.items.filter(item => item.id !== itemId);
  }

  applyDiscount(code) {
    this.discountCode = code;
  }

  getTotal() {
    return calculateTotal(this.items, 0.08);
  }
}"""
