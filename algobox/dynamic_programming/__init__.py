"""Dynamic programming: coin change, Fibonacci, knapsack, subsequences and subarrays."""