"""String searching and palindrome algorithms."""