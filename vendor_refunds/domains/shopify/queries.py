"""
Shopify Admin GraphQL documents used by the order gateway
"""

LINE_ITEM_FIELDS = """
  id
  title
  quantity
  refundableQuantity
  sku
  vendor
  originalUnitPriceSet {
    shopMoney {
      amount
      currencyCode
    }
  }
  originalTotalSet {
    shopMoney {
      amount
      currencyCode
    }
  }
  variant {
    id
    price
    title
    product {
      id
      vendor
    }
    image {
      url
      altText
    }
  }
"""

ORDER_FIELDS = f"""
  id
  name
  createdAt
  displayFinancialStatus
  displayFulfillmentStatus
  currencyCode
  lineItems(first: $lineItemsFirst) {{
    pageInfo {{
      hasNextPage
      endCursor
    }}
    edges {{
      node {{
        {LINE_ITEM_FIELDS}
      }}
    }}
  }}
"""

GET_ORDER_QUERY = f"""
query GetOrder($id: ID!, $lineItemsFirst: Int!) {{
  order(id: $id) {{
    {ORDER_FIELDS}
  }}
}}
"""

ORDER_LINE_ITEMS_QUERY = f"""
query GetOrderLineItems($id: ID!, $lineItemsFirst: Int!, $lineItemsAfter: String) {{
  order(id: $id) {{
    lineItems(first: $lineItemsFirst, after: $lineItemsAfter) {{
      pageInfo {{
        hasNextPage
        endCursor
      }}
      edges {{
        node {{
          {LINE_ITEM_FIELDS}
        }}
      }}
    }}
  }}
}}
"""

LIST_ORDERS_QUERY = f"""
query GetOrders($first: Int!, $lineItemsFirst: Int!) {{
  orders(first: $first, sortKey: CREATED_AT, reverse: true) {{
    edges {{
      node {{
        {ORDER_FIELDS}
      }}
    }}
  }}
}}
"""

REFUND_CREATE_MUTATION = """
mutation RefundCreate($input: RefundInput!) {
  refundCreate(input: $input) {
    refund {
      id
      totalRefundedSet {
        shopMoney {
          amount
          currencyCode
        }
      }
    }
    userErrors {
      field
      message
    }
  }
}
"""
